"""Setup script for charm."""
from setuptools import setup, find_packages  # type: ignore
import charm

setup(
    name='charm',
    version=charm.version,
    description='A small Forth-like stack calculator and REPL',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Interpreters',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='forth stack calculator',
    python_requires='>=3.12',
    packages=find_packages(),  # type: ignore
    install_requires=[
        'parsy>=1.3.0,<3',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
            'pytest',
            'scripttest',
        ],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
