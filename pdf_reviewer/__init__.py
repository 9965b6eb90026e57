"""
PDF Reviewer

This package:
1. Lets the user pick a PDF from a local directory
2. Extracts its text and strips characters outside a fixed whitelist
3. Sends the text to a chat-completion endpoint for a summary
4. Sends it again for a 10 item quiz
5. Prints both to the console

Requirements:
- Python 3.8+
- A RapidAPI key for the OpenAI chat-completion endpoint (RAPID_API_KEY)
"""

__version__ = "1.0.0"
