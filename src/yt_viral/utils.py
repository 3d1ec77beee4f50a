import logging
import sys
import colorlog

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

def setup_logging(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.handlers = [h for h in root.handlers if not getattr(h, "_yt_viral", False)]

    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s" + LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    ))
    handler._yt_viral = True
    root.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return root
