"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='typenorm',
	author='typenorm contributors',
	version='0.1.0',
	packages=['typenorm'],
	license='MIT',
	description='Canonical forms for union and tuple types, for use inside a gradual type checker',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.10",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Quality Assurance",
    ],
	python_requires='>=3.10',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
