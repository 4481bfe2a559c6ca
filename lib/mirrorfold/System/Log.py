import os
import time
import logging

from .prefix import addUserDataPrefix

logformat = "%(asctime)s.%(msecs)03d %(task)s %(levelname)s: %(message)s"


class TaskFormatter(logging.Formatter):
    def __init__(self, fmt=None, datefmt=None):
        logging.Formatter.__init__(self, fmt, datefmt)

    def format(self, record):
        if not hasattr(record, "task"):
            record.task = "unknown"

        record.message = record.getMessage()
        record.asctime = self.formatTime(record, self.datefmt)

        s = self._fmt % record.__dict__

        if record.exc_info:
            # Cache the traceback text, it is constant for the record
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            if s[-1:] != "\n":
                s = s + "\n"
            s = s + record.exc_text

        return s


formatter = TaskFormatter(fmt=logformat, datefmt='%H:%M:%S')

# Handlers are only attached by the command line front end, a host
# application keeps control of where mirrorfold records go
logger = logging.getLogger("mirrorfold")
logger.addHandler(logging.NullHandler())


class ExtraAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        kwargs["extra"] = kwargs.get("extra", {"task": "Default"})
        return msg, kwargs


log = ExtraAdapter(logger, {})

file_handler = None
console_handler = None


def setup_file_logging():
    """ Log to a timestamped file in the user data directory """
    global file_handler
    if file_handler is None:
        newName = time.strftime("%Y-%m-%d_%H-%M-%S") + ".log"
        path = addUserDataPrefix(newName)
        os.makedirs(os.path.dirname(path), mode=0o700, exist_ok=True)
        # delay=True argument prevents creating empty .log files
        file_handler = logging.FileHandler(path, delay=True, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return file_handler


def setup_console_logging(level=logging.DEBUG):
    """ Mirror log records to stderr """
    global console_handler
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    logger.setLevel(level)
    return console_handler
