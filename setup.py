from setuptools import setup

setup(
	name='hashinglib',
	version='1.0.0',
	description='ed2k, md5, sha1 and tiger tree hashes of files',
	packages=['libhashing'],
	scripts=['hashing.py'],
	python_requires='>=3.6',
	install_requires=['pycryptodome'],
	extras_require={
		'tth': ['rhash'],
		'test': ['pytest'],
	},
)
