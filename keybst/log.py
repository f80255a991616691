import sys

LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def error(*msg):
    logger.do_log(LOG_ERROR, "error: ", *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


class NoColors:
    RESET = ''
    WARN  = ''
    ERROR = ''
    DEBUG = ''

class Colors(NoColors):
    RESET = '\033[0m'
    WARN  = '\033[1;33m'
    ERROR = '\033[1;31m'
    DEBUG = '\033[36m'


class Logger(object):
    """Writes messages up to loglevel to logfile (the current sys.stderr
    if not given). colors is one of 'auto', 'always' or 'never'."""

    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        self._file = logfile
        self.set_colors(colors)

    @property
    def file(self):
        return self._file if self._file is not None else sys.stderr

    def set_colors(self, preference):
        if preference == 'auto':
            isatty = getattr(self.file, 'isatty', None)
            preference = 'always' if isatty is not None and isatty() else 'never'
        if preference == 'always':
            self.colors = Colors()
        elif preference == 'never':
            self.colors = NoColors()
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self._colormap = {
                LOG_WARN  : self.colors.WARN,
                LOG_ERROR : self.colors.ERROR,
                LOG_DEBUG2: self.colors.DEBUG,
                LOG_DEBUG3: self.colors.DEBUG
            }

    def do_log(self, level, *msg):
        if self.loglevel < level:
            return
        l = list(map(str, msg))
        color = self._colormap.get(level, '')
        if color:
            l.insert(0, color)
            l.append(self.colors.RESET)
        l.append("\n")
        self.file.write(''.join(l))


logger = Logger()
