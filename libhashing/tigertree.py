''' Tiger Tree Hash, the merkle hash used by Direct Connect and Gnutella. The
tree itself is RHash's, the file is only fed to it a piece at a time. '''

import base64
import logging

from libhashing import MissingEngine

log = logging.getLogger(__name__)

READ_SIZE = 64 * 1024

_rhash = None
def _load_rhash():
	global _rhash
	if _rhash is None:
		try:
			import rhash
		except ImportError as e:
			raise MissingEngine(
				'Tiger tree hashing needs the RHash bindings, '
				'install hashinglib[tth]') from e
		log.debug('using rhash %s for tth', getattr(rhash, '__version__', '?'))
		_rhash = rhash
	return _rhash

def root(file, read_size=READ_SIZE):
	""" Returns the raw tiger tree root of everything left in the open file. """
	rhash = _load_rhash()
	h = rhash.RHash(rhash.TTH)
	for data in iter(lambda: file.read(read_size), b''):
		h.update(data)
	h.finish()
	return h.raw(rhash.TTH)

def b32(digest):
	""" Unpadded lowercase base32, the usual way to write a tth. """
	return base64.b32encode(digest).decode('ascii').rstrip('=').lower()
