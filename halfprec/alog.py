import logging
import os
import sys
import time
import types


DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR

_SHORT_LEV = {
  DEBUG: 'DD',
  INFO: 'IN',
  WARNING: 'WA',
  ERROR: 'ER',
}


class Formatter(logging.Formatter):

  def format(self, r):
    hdr = self.make_header(r)
    msg = (r.msg % r.args) if r.args else r.msg

    return '\n'.join([f'{hdr}: {ln}' for ln in str(msg).split('\n')])

  def formatTime(self, r, datefmt=None):
    tstr = time.strftime(datefmt or '%Y%m%d %H:%M:%S', time.localtime(r.created))

    return f'{tstr}.{r.msecs * 1000:06.0f}'

  def make_header(self, r):
    lid = _SHORT_LEV.get(r.levelno, r.levelname[:2])

    return f'{lid}{self.formatTime(r)};{os.getpid()};{r.module}'


_DEFAULT_ARGS = dict(
  log_level=os.getenv('LOG_LEVEL', 'INFO'),
  log_file=os.getenv('LOG_FILE', 'STDERR'),
)


def _create_handler(fname):
  if fname == 'STDOUT':
    return logging.StreamHandler(sys.stdout)
  if fname == 'STDERR':
    return logging.StreamHandler(sys.stderr)

  return logging.FileHandler(fname, mode='a')


def setup_logging(args):
  numeric_level = logging.getLevelName(args.log_level.upper())
  handlers = []
  if args.log_file:
    for fname in args.log_file.split(','):
      handler = _create_handler(fname)
      handler.setLevel(numeric_level)
      handler.setFormatter(Formatter())
      handlers.append(handler)

  logging.basicConfig(level=numeric_level, handlers=handlers, force=True)

  set_current_level(numeric_level, set_logger=False)


def basic_setup(**kwargs):
  args = _DEFAULT_ARGS.copy()
  args.update(kwargs)
  setup_logging(types.SimpleNamespace(**args))


_LEVEL = DEBUG

def set_current_level(level, set_logger=True):
  if set_logger:
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in logger.handlers:
      handler.setLevel(level)

  global _LEVEL

  _LEVEL = level


def level_active(level):
  return _LEVEL <= level


_LOGGING_FRAMES = 1 if sys.version_info >= (3, 11) else 2

def _nested_args(kwargs):
  kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 1

  return kwargs


def log(level, msg, *args, **kwargs):
  if level_active(level):
    kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + _LOGGING_FRAMES
    logging.log(level, msg, *args, **kwargs)


def debug(msg, *args, **kwargs):
  log(DEBUG, msg, *args, **_nested_args(kwargs))


def info(msg, *args, **kwargs):
  log(INFO, msg, *args, **_nested_args(kwargs))


def warning(msg, *args, **kwargs):
  log(WARNING, msg, *args, **_nested_args(kwargs))


def error(msg, *args, **kwargs):
  log(ERROR, msg, *args, **_nested_args(kwargs))
