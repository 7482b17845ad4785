# Custom formatters for logging

import logging

class MixedFormatter(logging.Formatter):

    """
    Formatter adding the location of the call to warning, error and debug
    records: the function name for warnings and the line number otherwise
    """

    def format(self, record):
        msg = str(record.msg)
        if record.levelno == logging.WARNING:
            if not msg.startswith('[WARNING]'): # already decorated by another
                                                # handler
                record.msg = "[%s] %s, %s():\n %s\n" % (
                    record.levelname, record.name,
                    record.funcName, msg)
        elif record.levelno in (logging.DEBUG,
                                logging.ERROR,
                                logging.CRITICAL):
            if not msg.startswith('[' + record.levelname + ']'):
                record.msg = "[%s] %s, line %s:\n %s\n" % (
                    record.levelname, record.name,
                    record.lineno, msg)

        return super(MixedFormatter, self).format(record)
