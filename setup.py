import setuptools

setuptools.setup(
	name='monadparse',
	version='0.1.0',
	packages=[
		'monadparse',
		'monadparse.parsing',
		'monadparse.arithmetic',
	],
	python_requires='>=3.9',
	description='Monadic parser combinators, with a small arithmetic evaluator built on them',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
