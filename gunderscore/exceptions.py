class GunderscoreError(Exception):
    ''' Base class of every error raised by gunderscore itself '''


class InvalidArgument(GunderscoreError, ValueError):
    ''' An argument has a shape or type the called function cannot handle '''
