import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join(os.path.dirname(__file__), 'src', 'breakclust', '__init__.py')) as fh:
        return re.search(r"^__version__ = '([^']+)'", fh.read(), re.MULTILINE).group(1)


def parse_md_readme():
    try:
        with open('README.md') as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'numpy>=1.17',
    'pysam>=0.15',
    'scipy>=1.0',
    'shortuuid>=0.5.0',
]


setup(
    name='breakclust',
    version=get_version(),
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests']),
    description='Clustering of structural variant junctions from split read alignments',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.6',
    test_suite='tests',
)
