from setuptools import setup

setup(
  name    = "optbins",
  packages = [ "optbins", "optbins.classic" ],
  version = "0.1.0",
  description = 'Optimal bin count for regular histograms by penalized maximum likelihood',
  install_requires = [ "numpy" ],
  extras_require = {
          'test': [ "pytest" ],
          'examples': [ "matplotlib" ]},
  classifiers = ['Development Status :: 4 - Beta',
          'Environment :: Console',
          'License :: OSI Approved :: Apache Software License',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Mathematics',
          'Topic :: Software Development :: Libraries :: Python Modules'],
)
