"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='matika',
	version='0.1.0',
	packages=['matika', 'matika.tree_walker', 'matika.adapters', ],
	entry_points={
		'console_scripts': ["matika = matika.cmdline:main"],
	},
	license='MIT',
	description='A small expression language for numbers, functions, factors and plots',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"pygame>=2.4.0",
	],
)
