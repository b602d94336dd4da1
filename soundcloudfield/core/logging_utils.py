import logging

# Project logger (level is set by logging_config)
logger = logging.getLogger("soundcloudfield")


def log_info(message: str) -> None:
    """
    Neutral information message.
    """
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step, e.g. an outbound oEmbed request.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Non-fatal problem. Unavailable embeds are reported here.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    logger.error("❌ %s", message)


def log_debug(message: str) -> None:
    logger.debug("%s", message)
