import os
import mmap
import logging

from .exceptions import StreamException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around path/bytes objects to uniform the way
    a template is acquired: in both cases we obtain a read-only buffer.

    A path is memory mapped, bytes-like objects are used as they are. It's a
    context manager so the mapping is released on every exit path.'''
    def __init__(self, obj):
        self.obj = obj
        self._file = None
        self._mapping = None
        self.buffer = None

    def __enter__(self):
        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)
        if init_method is None:
            raise TypeError('\'%s\' is the wrong kind of source for a template' % self.obj.__class__.__name__)

        init_method()

        return self.buffer

    def __exit__(self, *exc_info):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        try:
            self._file = open(self.obj, 'rb')
            if os.fstat(self._file.fileno()).st_size == 0:
                # an empty file cannot be mapped
                self.buffer = memoryview(b'')
            else:
                self._mapping = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
                self.buffer = memoryview(self._mapping)
        except OSError as e:
            self.close()
            raise StreamException(self.obj) from e

    def init_PosixPath(self):
        self.obj = str(self.obj)
        self.init_str()

    init_WindowsPath = init_PosixPath

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.buffer = memoryview(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def close(self):
        if self.buffer is not None:
            self.buffer.release()
            self.buffer = None
        if self._mapping is not None:
            self._mapping.close()
            self._mapping = None
        if self._file is not None:
            self._file.close()
            self._file = None
