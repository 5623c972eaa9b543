import setuptools

setuptools.setup(
	name='reglex',
	version='0.1.0',
	packages=[
		'reglex',
		'reglex.support',
	],
	description='A lex-style scanner generator driven by regular expressions and scan actions',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
