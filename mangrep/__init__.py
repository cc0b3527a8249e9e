"""Search kernel, glibc and man-pages sources from the command line."""

__version__ = '0.1.0'
