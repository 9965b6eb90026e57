#!/usr/bin/env python3
"""
Command-line interface for the PDF Reviewer package.

This script provides a command-line interface to:
1. Pick a PDF file from the pdf directory
2. Extract and clean its text
3. Generate a summary and a quiz with a chat-completion model
4. Print both to the console
"""

import argparse
import colorama
from dotenv import load_dotenv
from colorama import Fore, Style

# Import package modules
from .client import CompletionClient
from .config import TASKS, load_config
from .errors import ReviewerError
from .reporter import Reporter
from .reviewer import PDFReviewer
from .utils import ConsoleInteraction, setup_logging

# Initialize colorama
colorama.init(autoreset=True)

def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pick a PDF, then summarize it and generate a quiz from it with a chat model",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Input parameters
    input_group = parser.add_argument_group('Input Parameters')
    input_group.add_argument('--pdf-dir', type=str, default='pdf',
                      help='Directory to pick the PDF from (relative paths are resolved against the working directory)')

    # Review parameters
    review_group = parser.add_argument_group('Review Parameters')
    review_group.add_argument('--api-key', type=str,
                       help='RapidAPI key (can also be set as RAPID_API_KEY environment variable)')
    review_group.add_argument('--model', type=str, default='gpt-3.5-turbo',
                       help='Model to use for the review')
    review_group.add_argument('--task', dest='tasks', action='append', choices=sorted(TASKS),
                       help='Review task to run; repeat to run several in order (default: summary, then quiz)')
    review_group.add_argument('--show-original', action='store_true',
                       help='Print the cleaned document text before the results')

    # Network parameters
    network_group = parser.add_argument_group('Network Parameters')
    network_group.add_argument('--timeout', type=float, default=120.0,
                        help='Seconds to wait for the endpoint to answer each request')
    network_group.add_argument('--retries', type=int, default=2,
                        help='Retries on connection failures and retryable HTTP statuses')

    # Logging parameters
    logging_group = parser.add_argument_group('Logging Parameters')
    logging_group.add_argument('--verbose', action='store_true',
                         help='Enable verbose logging')
    logging_group.add_argument('--log-file', type=str,
                         help='Path to save log file')

    return parser.parse_args(argv)

def main(argv=None):
    """Main function to run the review."""
    # Load environment variables from .env file
    load_dotenv()

    # Parse arguments
    args = parse_arguments(argv)

    # Setup logging
    logger = setup_logging(args)

    client = None
    try:
        config = load_config(args)
        interaction = ConsoleInteraction()
        client = CompletionClient(
            api_key=config.api_key,
            api_url=config.api_url,
            api_host=config.api_host,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_factor=config.backoff_factor,
            interaction=interaction,
        )
        reviewer = PDFReviewer(config, client, interaction, Reporter())
        reviewer.run()
    except ReviewerError as e:
        logger.error(f"{Fore.RED}Error: {e}{Style.RESET_ALL}")
        logger.debug("Details:", exc_info=True)
        return e.exit_code
    except KeyboardInterrupt:
        logger.warning(f"\n{Fore.YELLOW}Interrupted{Style.RESET_ALL}")
        return 130
    finally:
        if client is not None:
            client.close()

    logger.info(f"{Fore.GREEN}Review complete!{Style.RESET_ALL}")
    return 0

if __name__ == "__main__":
    exit(main())
