from setuptools import setup
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='nameguard',
    version='1.0.0.dev1',
    packages=[
        'nameguard'
    ],
    description='Check file and folder names against remote storage naming rules',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Topic :: Desktop Environment :: File Managers',
        'Topic :: System :: Filesystems',
    ],
    keywords='nameguard file name validation sync reserved characters windows',
    install_requires=[
        'Click'
    ],
    extras_require={
        'test': ['pytest']
    },
    python_requires='>=3.7',
    entry_points='''
        [console_scripts]
        nameguard=nameguard.cli:cli
    ''',
    test_suite="tests"
)
