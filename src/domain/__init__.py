"""
Domain layer for sender extraction business logic.

This layer contains:
- Data models (mailbox, parse and processing results)
- Header validation, comment stripping and address extraction
- The SES processing pipeline (explicit success/failure handling)
"""
