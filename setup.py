from setuptools import setup

setup(
	name='sumforms',
	version='1.0.0',	
	description='Four spellings of addition, with a randomized self-check bench',
	license='GPL-3.0',
	packages=['sumforms'],
	install_requires=['numpy'],
	extras_require={
		'test': ['pytest', 'hypothesis'],
	},
	entry_points={
		'console_scripts': [
			'sumforms=sumforms.main:main',
			'sumforms-check=sumforms.check:main',
		],
	},

	classifiers=[
		'Development Status :: 5 - Production/Stable',
		'Intended Audience :: Education',
		'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',  
		'Operating System :: POSIX :: Linux',		
		'Programming Language :: Python :: 3',
	],
)
