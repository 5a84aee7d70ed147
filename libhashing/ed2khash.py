''' ed2k hashing. The file is cut into chunks of 9728000 bytes, every chunk
is md4 hashed, and the chunk hashes are combined into the final hash. '''

import logging
import os.path

from Crypto.Hash import MD4

log = logging.getLogger(__name__)

CHUNK_SIZE = 9728000
DIGEST_SIZE = 16

def md4(data):
	""" The block hash, 16 bytes of md4. """
	return MD4.new(data).digest()

def chunks(file, size=CHUNK_SIZE):
	""" Yields the chunks of an open binary file, starting where the file is
	currently positioned. A short read is only ever the last chunk. """
	if size <= 0:
		raise ValueError('chunk size must be positive, not %r' % size)
	while True:
		x = file.read(size)
		# Raw files and pipes may return less than asked for before the end.
		while x and len(x) < size:
			more = file.read(size - len(x))
			if not more:
				break
			x += more
		if x:
			yield x
		else:
			return

def segment_count(length, size=CHUNK_SIZE):
	if length <= 0:
		return 0
	return -(-length // size)

def segment_digests(file, size=CHUNK_SIZE):
	""" The md4 digest of every chunk, in file order. """
	hashes = [md4(data) for data in chunks(file, size)]
	log.debug('hashed %d chunk(s) of %d bytes', len(hashes), size)
	return hashes

def _empty(hashes):
	# Nothing was read, so nothing was hashed. An empty file gets an empty
	# hash, not the md4 of an empty chunk.
	return b''

def _single(hashes):
	# One chunk, the chunk hash is the file hash.
	return hashes[0]

def _multiple(hashes):
	return md4(b''.join(hashes))

def finalize(hashes):
	""" Combines the chunk digests into the raw ed2k digest. """
	if not hashes:
		return _empty(hashes)
	if len(hashes) == 1:
		return _single(hashes)
	return _multiple(hashes)

def hash(file):
	""" Returns the ed2k hash of the given file. """
	return finalize(segment_digests(file)).hex()

def link(file, digest=None):
	""" Returns the ed2k link of the given file. An ed2k hash that is already
	known can be passed in, so the file is not read again. """
	if digest is None:
		digest = hash(file)
	return "ed2k://|file|%s|%d|%s|" % (
		os.path.basename(file.name),
		os.path.getsize(file.name),
		digest
	)
