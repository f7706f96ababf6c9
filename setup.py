import glob
import os

from setuptools import find_packages, setup

top_level_modules = [os.path.splitext(os.path.basename(p))[0] for p in glob.glob('src/*.py')]

setup(
    name='dataproxy_bench',
    version='0.0.0-dev',
    packages=find_packages(where='src', exclude=['tests']),
    package_dir={'': 'src'},
    py_modules=[m for m in top_level_modules if m != '__init__'],
    include_package_data=True,
    description='Dataproxy page consumption benchmark',
    python_requires='>=3.9',
    install_requires=[
        'requests',
        'pydantic>=2',
        'pydantic-core',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['dataproxy-bench=cli:main'],
    },
)
