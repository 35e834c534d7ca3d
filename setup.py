#!/usr/bin/env python3

from setuptools import setup, find_packages


setup(name='halfprec',
      version='0.1.0',
      description='IEEE 754 binary16 (half precision) conversion APIs',
      author='Davide Libenzi',
      packages=find_packages(exclude=['tests', 'tests.*']),
      include_package_data=True,
      install_requires=[
          'numpy',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      },
      )
