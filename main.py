#!/usr/bin/env python3
"""
PDF Reviewer

Main entry point for the PDF Reviewer package.
This script imports and runs the main function from the package.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from pdf_reviewer.cli import main

if __name__ == "__main__":
    exit(main())
