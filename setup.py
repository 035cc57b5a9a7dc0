#!/usr/bin/env python
# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import os
import shutil
import sys

from setuptools import setup, Command, Distribution


def get_command_class(name):
    # Returns the right class for either distutils or setuptools
    return Distribution({}).get_command_class(name)


distutils_clean = get_command_class("clean")


class clean(distutils_clean):
    def run(self):
        # also remove bytecode and editor backups from the source tree
        distutils_clean.run(self)

        def should_remove(filename):
            return (filename.lower()[-4:] in [".pyc", ".pyo"] or
                    filename.endswith("~"))

        for pathname, dirs, files in os.walk(os.path.dirname(__file__)):
            for filename in filter(should_remove, files):
                try:
                    os.unlink(os.path.join(pathname, filename))
                except OSError as err:
                    print(str(err))

        for base in ["coverage", "build", "dist"]:
            path = os.path.join(os.path.dirname(__file__), base)
            if os.path.isdir(path):
                shutil.rmtree(path)


class test_cmd(Command):
    description = "run automated tests"
    user_options = [
        ("to-run=", None, "list of tests to run (default all)"),
        ("exitfirst", "x", "stop after first failing test"),
    ]

    def initialize_options(self):
        self.to_run = []
        self.exitfirst = False

    def finalize_options(self):
        if self.to_run:
            self.to_run = self.to_run.split(",")
        self.exitfirst = bool(self.exitfirst)

    def run(self):
        import tests

        status = tests.unit(self.to_run, self.exitfirst)
        if status != 0:
            raise SystemExit(status)


class coverage_cmd(Command):
    description = "generate test coverage data"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        try:
            from coverage import coverage
        except ImportError:
            raise SystemExit(
                "Missing 'coverage' module. See "
                "https://pypi.python.org/pypi/coverage")

        for key in list(sys.modules.keys()):
            if key.startswith("mp3metadata"):
                del sys.modules[key]

        cov = coverage()
        cov.start()

        cmd = self.reinitialize_command("test")
        cmd.ensure_finalized()
        cmd.run()

        dest = os.path.join(os.getcwd(), "coverage")

        cov.stop()
        cov.html_report(
            directory=dest,
            ignore_errors=True,
            include=["mp3metadata/*"])

        print("Coverage summary: file://%s/index.html" % dest)


if __name__ == "__main__":
    # required for PEP 517
    sys.path.insert(0, os.path.dirname(os.path.realpath(__file__)))

    from mp3metadata import version_string

    with open("README.rst", encoding="utf-8") as h:
        long_description = h.read()

    cmd_classes = {
        "clean": clean,
        "test": test_cmd,
        "coverage": coverage_cmd,
    }

    setup(cmdclass=cmd_classes,
          name="mp3metadata",
          version=version_string,
          description="read frame headers, ID3v1 and ID3v2 tags of MP3 files",
          license="GPL-2.0-or-later",
          classifiers=[
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: Implementation :: CPython",
            ("License :: OSI Approved :: "
             "GNU General Public License v2 or later (GPLv2+)"),
            "Topic :: Multimedia :: Sound/Audio",
          ],
          packages=[
            "mp3metadata",
            "mp3metadata._tools",
          ],
          package_data={
            "mp3metadata": ["py.typed"],
          },
          python_requires=">=3.12",
          extras_require={
            "test": ["pytest", "hypothesis", "flake8", "coverage"],
          },
          entry_points={
            "console_scripts": [
              "mp3meta-inspect=mp3metadata._tools.mp3meta_inspect:entry_point",
            ],
          },
          long_description=long_description,
    )
