import hashlib
import io

import pytest

from libhashing import streamhash, HashingError

DATA = bytes(range(256)) * 41

def test_empty_digests():
	assert streamhash.md5(io.BytesIO(b'')) == 'd41d8cd98f00b204e9800998ecf8427e'
	assert streamhash.sha1(io.BytesIO(b'')) == \
		'da39a3ee5e6b4b0d3255bfef95601890afd80709'

def test_abc():
	assert streamhash.md5(io.BytesIO(b'abc')) == \
		'900150983cd24fb0d6963f7d28e17f72'
	assert streamhash.sha1(io.BytesIO(b'abc')) == \
		'a9993e364706816aba3e25717850c26c9cd0d89d'

@pytest.mark.parametrize('buffer_size', [1, 7, 1000, 4096, len(DATA), 10**6])
def test_buffer_size_does_not_matter(buffer_size):
	assert streamhash.md5(io.BytesIO(DATA), buffer_size) == \
		hashlib.md5(DATA).hexdigest()
	assert streamhash.sha1(io.BytesIO(DATA), buffer_size) == \
		hashlib.sha1(DATA).hexdigest()

def test_other_algorithm():
	assert streamhash.digest(io.BytesIO(DATA), 'sha256') == \
		hashlib.sha256(DATA).hexdigest()

def test_bad_buffer_size():
	with pytest.raises(HashingError):
		streamhash.md5(io.BytesIO(DATA), 0)

def test_reads_in_bounded_pieces():
	class Counting(io.BytesIO):
		biggest = 0
		def read(self, size=-1):
			assert size > 0
			Counting.biggest = max(Counting.biggest, size)
			return super().read(size)
	streamhash.sha1(Counting(DATA), 512)
	assert Counting.biggest == 512
