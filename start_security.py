#!/usr/bin/env python3
"""Entry point: arm the system and run camera images through the security service."""

import argparse
import sys
from datetime import datetime

from catpoint_security.config_manager import ConfigManager
from catpoint_security.logging_config import get_logger, setup_logging
from catpoint_security.models.security import ArmingStatus
from catpoint_security.services import (
    LoggingStatusListener,
    RandomCatClassifier,
    SecurityError,
    SecurityService
)
from catpoint_security.utils import format_timestamp, load_image


def main(argv=None):
    """Main entry point for the security monitor."""
    parser = argparse.ArgumentParser(description="Catpoint security monitor")
    parser.add_argument("images", nargs="+", help="Camera images to process")
    parser.add_argument("--config", default=None, help="Path to the JSON configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random classifier")
    args = parser.parse_args(argv)

    config_manager = ConfigManager(args.config)
    config = config_manager.get_config()
    setup_logging(config.log_level, config.log_dir)

    logger = get_logger("start_security")
    logger.info(f"Starting Catpoint Security at {format_timestamp(datetime.now())}")

    try:
        security_service = SecurityService(
            config_manager.build_state_store(),
            RandomCatClassifier(seed=args.seed),
            config=config
        )
        security_service.add_status_listener(LoggingStatusListener())

        security_service.set_arming_status(ArmingStatus.ARMED_HOME)
        for image_path in args.images:
            logger.info(f"Processing image {image_path}")
            security_service.process_image(load_image(image_path))
    except (SecurityError, FileNotFoundError) as e:
        logger.error(f"Security monitor failed: {e}")
        return 1

    logger.info(
        f"Final state: arming={security_service.get_arming_status().name} "
        f"alarm={security_service.get_alarm_status().name}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
