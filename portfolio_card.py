"""Main entry point for the GitHub portfolio card.

Fetches a user's profile, repositories and language skills and prints the card.
"""
import argparse
import asyncio
import json
import os
import sys
import logging
from typing import List, Optional
from dotenv import load_dotenv
from github_portfolio.application.portfolio_service import PortfolioService
from github_portfolio.application.username import extract_username
from github_portfolio.domain.errors import FetchError
from github_portfolio.infrastructure.github_client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    GitHubRestClient,
)
from github_portfolio.presentation.card_view import portfolio_to_dict, render_portfolio

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')


EXIT_FETCH_ERROR = 1
EXIT_INVALID_INPUT = 2
INVALID_INPUT_MESSAGE = "Please enter a valid GitHub username or profile URL"


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def non_negative_int(value: str) -> int:
    """argparse type for counts such as the number of repositories shown."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def positive_float(value: str) -> float:
    """argparse type for durations in seconds."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, defaulting to environment configuration."""
    parser = argparse.ArgumentParser(description="Render a GitHub portfolio card.")
    parser.add_argument("user", help="GitHub username or profile URL")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the portfolio as JSON instead of a text card"
    )
    parser.add_argument(
        "--top",
        type=non_negative_int,
        default=os.getenv("TOP_REPOSITORIES", "6"),
        help="number of top repositories to show (default: 6)"
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=os.getenv("GITHUB_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)),
        help="per-request timeout in seconds"
    )
    parser.add_argument(
        "--api-url",
        default=os.getenv("GITHUB_API_URL", DEFAULT_BASE_URL),
        help="GitHub REST API base URL"
    )
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """Build and print the portfolio card, returning the process exit code."""
    args = parse_args(argv)

    username = extract_username(args.user)
    if not username:
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        return EXIT_INVALID_INPUT

    github_client = GitHubRestClient(base_url=args.api_url, timeout_seconds=args.timeout)
    service = PortfolioService(github_client=github_client)

    try:
        portfolio = await service.build_portfolio(username)
    except FetchError as e:
        print(e.message, file=sys.stderr)
        return EXIT_FETCH_ERROR
    finally:
        await service.close()

    if args.json:
        print(json.dumps(portfolio_to_dict(portfolio, args.top), indent=2))
    else:
        print(render_portfolio(portfolio, args.top))
    return 0


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
