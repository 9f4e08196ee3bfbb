"""Command-line interface for the word pair generator."""

import asyncio
import json
import logging

import aiohttp
import click
import structlog

from .config import DEFAULT_BATCH_SIZE, GEMINI_API_KEY, MODEL_NAME
from .errors import WordPairsError
from .generator import generate_word_batch, generate_word_pair
from .models import DIFFICULTIES

log = structlog.get_logger()


def configure_logging(verbose: bool = False):
    """JSON logs by default; human-readable console output with --verbose."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
        renderer = structlog.dev.ConsoleRenderer()
    else:
        logging.basicConfig(level=logging.WARNING)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@click.command()
@click.option(
    "--api-key",
    default=GEMINI_API_KEY,
    help="Gemini API key (defaults to GEMINI_API_KEY)"
)
@click.option(
    "-c", "--category",
    default=None,
    help="Pin generation to this category (random category if omitted)"
)
@click.option(
    "-n", "--count",
    type=click.IntRange(min=1),
    default=DEFAULT_BATCH_SIZE,
    help="Number of pairs to request in batch mode"
)
@click.option(
    "-d", "--difficulty",
    type=click.Choice(DIFFICULTIES),
    default="medium",
    help="Difficulty tier"
)
@click.option(
    "--single",
    is_flag=True,
    help="Generate one unvalidated pair instead of a batch"
)
@click.option(
    "--model",
    default=MODEL_NAME,
    help="Gemini model to use"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
def main(api_key: str, category: str, count: int, difficulty: str,
         single: bool, model: str, verbose: bool):
    """Generate Russian/English word pairs for the guessing game."""
    configure_logging(verbose)

    if not api_key or not api_key.strip():
        raise click.UsageError("No API key: pass --api-key or set GEMINI_API_KEY")

    log.info("Starting word pair generator",
             category=category,
             count=count,
             difficulty=difficulty,
             single=single,
             model=model)

    try:
        if single:
            pair = asyncio.run(generate_word_pair(
                api_key, category=category, difficulty=difficulty, model=model
            ))
            output = pair.model_dump()
        else:
            pairs = asyncio.run(generate_word_batch(
                api_key, category=category, count=count, difficulty=difficulty, model=model
            ))
            output = [p.model_dump() for p in pairs]
            if not pairs:
                log.warning("No word pairs survived filtering")
    except (WordPairsError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        message = str(e) or type(e).__name__
        log.error("Generation failed", error=message)
        raise click.ClickException(message)

    click.echo(json.dumps(output, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
