#!/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
  name="tkbuilder", version="0.1.0",
  python_requires=">=3.6",
  author="duangsuse", author_email="fedora-opensuse@outlook.com",
  description="Declarative widget construction layer for tkinter: kinds, options, grid and handlers to typed wrappers",
  long_description="""
tkbuilder creates tkinter/ttk widget trees from (kind, options, layout, event handlers) descriptions,
and returns wrappers with uniform value access, scrollbars composition and handler wiring
""",
  extras_require={"test": ["pytest"]},
  packages=find_packages(exclude=["tests"]))
