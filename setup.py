from setuptools import setup, find_packages

with open('README.md') as file:
	long_description = file.read()

setup(
	name="iterqueue",
	version="0.1.dev0",
	description="Lazily merges sorted sequences using a heap of cursors",
	long_description = long_description,
	long_description_content_type = 'text/markdown',
	package_data = {'iterqueue': ['py.typed']},
	packages = find_packages('src'),
	package_dir = {'': 'src'},
	zip_safe = False,
	python_requires = '>=3.7',
	install_requires = [
		'typing-extensions',
	],
	extras_require = {
		'test': ['pytest >= 6.2'],
	},
)
