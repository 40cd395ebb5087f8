"""
Core modules for quick transaction input.

This package contains:
- config: Application configuration and settings
- exceptions: Custom exception classes
- keywords: Magnitude suffix and income/expense keyword tables
- logger: Logging configuration
- matching: Transaction type detection by keyword
- parsing: Amount/note extraction
- quick_input: Extraction plus type detection pipeline
- schema: Pydantic models for results and API payloads
"""
