"""Main entry point for the concatwords package."""

from loguru import logger

from concatwords.cli import create_parser
from concatwords.core import load_config
from concatwords.processing import run_pipeline
from concatwords.utils import Constants, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("concatwords - Composite Word Finder")
        logger.info("=" * Constants.BANNER_WIDTH)
        logger.info("")
        logger.info("Configuration:")
        if config.inputs:
            logger.info(f"  Inputs: {', '.join(config.inputs)}")
        logger.info(f"  Tie break: {config.tie_break}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * Constants.BANNER_WIDTH)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * Constants.BANNER_WIDTH)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * Constants.BANNER_WIDTH)
            logger.error("✗ Processing failed")
            logger.error("=" * Constants.BANNER_WIDTH)
        raise


if __name__ == "__main__":
    main()
