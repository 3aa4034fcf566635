import logging
import sys

import settings


class MyLogger(object):
    log = logging.getLogger('kmeans2d')
    ##diagnostics go to stderr, results to stdout
    fmt = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)s - %(message)s'
    formatter = logging.Formatter(fmt)
    err_hdlr = logging.StreamHandler(sys.stderr)
    err_hdlr.setFormatter(formatter)
    log.addHandler(err_hdlr)
    log.setLevel(getattr(logging, settings.LOG_LEVEL, logging.WARNING))

    @staticmethod
    def get_logger():
        return MyLogger.log
