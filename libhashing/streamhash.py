''' Whole-file hashes, the file is fed through a hashlib object a little at a
time, so a big file never ends up in memory. '''

import hashlib

from libhashing import HashingError

BUFFER_SIZE = 4096

def digest(file, algorithm, buffer_size=BUFFER_SIZE):
	""" Returns the hex digest of everything left in the open file. """
	if buffer_size <= 0:
		raise HashingError('Read buffer must be positive, not %r' % buffer_size)
	h = hashlib.new(algorithm)
	for data in iter(lambda: file.read(buffer_size), b''):
		h.update(data)
	return h.hexdigest()

def md5(file, buffer_size=BUFFER_SIZE):
	return digest(file, 'md5', buffer_size)

def sha1(file, buffer_size=BUFFER_SIZE):
	return digest(file, 'sha1', buffer_size)
