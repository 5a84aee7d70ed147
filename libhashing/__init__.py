import os, os.path
import sys
import logging
from contextlib import contextmanager
from decimal import Decimal, ROUND_HALF_UP

log = logging.getLogger(__name__)

class HashingError(Exception):
	pass

# The tiger tree needs an engine that is not installed.
class MissingEngine(HashingError):
	pass

class ConfigError(HashingError):
	pass

from libhashing import ed2khash, streamhash, tigertree

SCHEMES = ('ed2k', 'md5', 'sha1', 'tth')
SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB')

# Default config values.
config = {
	'schemes': ' '.join(SCHEMES),
	'size_format': '{0} {1}',
	'buffer_size': str(streamhash.BUFFER_SIZE),
}

def _config_items(file):
	for line in map(lambda s: s.strip(), file.readlines()):
		if line.startswith('#') or not line:
			continue
		key, *value = line.split(None, 1)
		yield key, value[0] if value else ''

def load_config_file(file_name):
	try:
		with open(file_name, 'r') as fp:
			config.update(_config_items(fp))
	except FileNotFoundError:
		return False
	except OSError as e:
		print('ERROR: Unable to read config file:', file_name, e, file=sys.stderr)
		return False
	log.debug('loaded config from %s', file_name)
	return True

def load_default_config():
	load_config_file('/etc/hashingrc')
	load_config_file(os.path.expanduser('~/.hashingrc'))

def config_schemes():
	return config['schemes'].split()

def config_buffer_size():
	try:
		size = int(config['buffer_size'])
	except ValueError:
		raise ConfigError('buffer_size is not a number: %r' %
			config['buffer_size'])
	if size <= 0:
		raise ConfigError('buffer_size must be positive, not %d' % size)
	return size

def check_config():
	config_ok = True
	for key in 'schemes size_format buffer_size'.split():
		if not key in config:
			print('ERROR: Missing config variable:', key, file=sys.stderr)
			config_ok = False
	if not config_ok:
		return False
	for scheme in config_schemes():
		if not scheme in SCHEMES:
			print('ERROR: Unknown scheme:', scheme, file=sys.stderr)
			config_ok = False
	try:
		config_buffer_size()
	except ConfigError as e:
		print('ERROR:', e, file=sys.stderr)
		config_ok = False
	return config_ok

@contextmanager
def open_source(source):
	""" Yields a readable binary file for either a path or an already open
	file. Files opened here are closed again, open files are left alone. """
	if isinstance(source, (str, bytes, os.PathLike)):
		with open(source, 'rb') as file:
			yield file
	else:
		yield source

def ed2k(source):
	with open_source(source) as file:
		return ed2khash.hash(file)

def md5(source, buffer_size=streamhash.BUFFER_SIZE):
	with open_source(source) as file:
		return streamhash.md5(file, buffer_size)

def sha1(source, buffer_size=streamhash.BUFFER_SIZE):
	with open_source(source) as file:
		return streamhash.sha1(file, buffer_size)

def tth(source):
	with open_source(source) as file:
		return tigertree.b32(tigertree.root(file))

_hashers = {
	'ed2k': ed2k,
	'md5': md5,
	'sha1': sha1,
	'tth': tth,
}

def hash_file(source, scheme, **kwargs):
	""" Hashes a path or open file with the named scheme. Extra keyword
	arguments go to the hasher, e.g. buffer_size for md5 and sha1. """
	try:
		hasher = _hashers[scheme]
	except KeyError:
		raise HashingError('Unknown hash scheme: %s' % scheme) from None
	return hasher(source, **kwargs)

def human_readable_size(size, formatting='{0} {1}'):
	""" Formats a byte count, 1536 becomes '1.5 KB'. The number handed to the
	format is rounded to one decimal, and is an int when that is whole. """
	order = 0
	while size >= 1024 and order < len(SIZE_UNITS) - 1:
		order += 1
		size /= 1024
	# Halves round up, like a 0.# pattern.
	size = Decimal(size).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
	if size == size.to_integral_value():
		size = int(size)
	return formatting.format(size, SIZE_UNITS[order])
