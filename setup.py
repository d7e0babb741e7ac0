import setuptools

setuptools.setup(
	name='minsky',
	version='0.1.0',
	packages=[
		'minsky',
	],
	install_requires=[
		'booze-tools>=0.6.1,<0.7',
	],
	extras_require={
		'test': ['pytest'],
	},
	python_requires='>=3.9',
	description='Magnificent Minsky Machines: a notation for multi-tape counter machines, and an interpreter for it',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Interpreters",
		"Development Status :: 3 - Alpha",
    ],
)
