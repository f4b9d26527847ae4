import logging

LOG_FORMAT = "[ %(asctime)s ] %(lineno)d %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
	logging.basicConfig(format=LOG_FORMAT, level=level)
