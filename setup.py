# -*- coding: utf-8 -*-
#
"""setuptools-based setup.py for bounce.

Usage as usual with setuptools:
    pip install .
    pip install -e .[test]
    python3 setup.py sdist
    python3 setup.py bdist_wheel

For details, see
    http://setuptools.readthedocs.io/en/latest/setuptools.html#command-reference
"""

import ast
import os

from setuptools import setup  # type: ignore[import]


def read(*relpath, **kwargs):  # https://blog.ionelmc.ro/2014/05/25/python-packaging/#the-setup-script
    with open(os.path.join(os.path.dirname(__file__), *relpath),
              encoding=kwargs.get('encoding', 'utf8')) as fh:
        return fh.read()

# Extract __version__ from the package __init__.py
# (since it's not a good idea to actually run __init__.py during the build process).
init_py_path = os.path.join("bounce", "__init__.py")
version = None
try:
    with open(init_py_path) as f:
        for line in f:
            if line.startswith("__version__"):
                module = ast.parse(line, filename=init_py_path)
                expr = module.body[0]
                assert isinstance(expr, ast.Assign)
                v = expr.value
                assert isinstance(v, ast.Constant)
                version = v.value
                break
except FileNotFoundError:
    pass
if not version:
    raise RuntimeError(f"Version information not found in {init_py_path}")

#########################################################
# Call setup()
#########################################################

setup(
    name="bounce",
    version=version,
    # the unit tests in `bounce.tests` are NOT deployed.
    packages=["bounce"],
    provides=["bounce"],
    keywords=["functional-programming", "tail-call-optimization", "tco", "trampoline",
              "thunk", "continuations", "continuation-passing-style", "cps", "recursion"],
    install_requires=[],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    description="Deep recursion without a deep stack: thunks, trampolines and continuations.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    license="BSD",
    classifiers=["Development Status :: 4 - Beta",
                 "Intended Audience :: Developers",
                 "Intended Audience :: Education",
                 "License :: OSI Approved :: BSD License",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Programming Language :: Python :: Implementation :: CPython",
                 "Programming Language :: Python :: Implementation :: PyPy",
                 "Topic :: Software Development :: Libraries",
                 "Topic :: Software Development :: Libraries :: Python Modules"
                 ],
    zip_safe=True
)
