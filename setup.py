#!/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
  name="tkui", version="0.1.0",
  python_requires=">=3.7",
  description="Object-oriented Tcl/Tk widget binding for Python, on top of the tkinter interpreter",
  long_description="""
tkui drives a Tcl/Tk interpreter with text commands: widgets are paths with declared option sets,
callbacks are dispatched through one registered Tcl command, and window/theme/font facades
format and evaluate the matching Tk commands.
""",

  install_requires=["ttkthemes"],
  extras_require={"test": ["pytest"]},
  packages=find_packages(exclude=["tests", "tests.*"]))
