import argparse
import logging
import os.path
import sys

import libhashing
from libhashing import ed2khash, HashingError

def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description='Hash files the way file sharing networks do.')
	parser.add_argument('-s', '--scheme',
		action='append', dest='schemes', choices=libhashing.SCHEMES,
		help='Hash scheme to use, may be given more than once. '
			'Defaults to the schemes in the config.')
	parser.add_argument('-l', '--link',
		action='store_true', dest='link',
		help='Also print the ed2k link of every file.')
	parser.add_argument('-c', '--config',
		action='store', dest='config', type=argparse.FileType('r'),
		help='Alternative config file to use.')
	parser.add_argument('-v', '--verbose',
		action='store_true', dest='verbose',
		help='Talk about what is going on.')
	parser.add_argument('files',
		metavar='FILE', type=argparse.FileType('rb'), nargs='*',
		help='a file to hash')
	return parser.parse_args(argv)

def process(file, schemes, link=False, buffer_size=None, out=sys.stdout):
	size = os.path.getsize(file.name)
	print('%s (%s)' % (
		os.path.basename(file.name),
		libhashing.human_readable_size(size, libhashing.config['size_format'])),
		file=out)
	if buffer_size is None:
		buffer_size = libhashing.config_buffer_size()
	digests = {}
	for scheme in schemes:
		file.seek(0)
		if scheme in ('md5', 'sha1'):
			digest = libhashing.hash_file(file, scheme, buffer_size=buffer_size)
		else:
			digest = libhashing.hash_file(file, scheme)
		digests[scheme] = digest
		print(scheme, digest, file=out)
	if link:
		file.seek(0)
		print(ed2khash.link(file, digests.get('ed2k')), file=out)

def main(argv=None):
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format='%(levelname)s %(name)s: %(message)s')
	
	libhashing.load_default_config()
	if args.config:
		with args.config:
			libhashing.load_config_file(args.config.name)
	if not libhashing.check_config():
		return 2
	
	schemes = args.schemes or libhashing.config_schemes()
	status = 0
	# OK, run over the files.
	for file in args.files:
		with file:
			try:
				process(file, schemes, args.link)
			except (OSError, HashingError) as e:
				print('ERROR:', file.name, e, file=sys.stderr)
				status = 1
	return status
