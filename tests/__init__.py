#!/usr/bin/env python3
import unittest
from os import path, chdir
import sys


def tests(file):
  # runs the suite by executing this file directly
  # the same as `python -m unittest discover -s tests -t .`
  # from the repository root
  start_dir = path.dirname(path.realpath(file))
  top_level_dir = path.dirname(start_dir)
  
  # the modules under test expect the repository root
  # as the current directory and import root
  chdir(top_level_dir)
  
  result = unittest.TextTestRunner().run(
    unittest.defaultTestLoader.discover(
      start_dir,
      top_level_dir=top_level_dir
    )
  )
  
  sys.exit(not result.wasSuccessful())


if __name__ == '__main__': tests(__file__)
