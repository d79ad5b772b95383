import logging
import sys
import json


class JsonFormatter(logging.Formatter):
    """
    Format log records as one JSON object per line
    """

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        # Training progress attaches these through `extra`
        for key in ("epoch", "loss"):
            if hasattr(record, key):
                log_record[key] = getattr(record, key)
        return json.dumps(log_record, ensure_ascii=False)


def setup_logger(name="xor_backprop", level="INFO", json_format=False):
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid stacking handlers when called more than once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if json_format:
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
