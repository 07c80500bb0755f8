# -*- coding: utf-8 -*-

import setuptools
import os

# for some reason os gets munged after this point on Windows, so compute it here.
readme_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md")

setuptools.setup(
    name="nionhostui",
    version="0.1.0",
    author="Nion Software",
    author_email="swift@nion.com",
    description="Declarative widget trees and click routing on top of an imperative host UI API.",
    long_description=open(readme_path).read(),
    long_description_content_type="text/markdown",
    packages=["nion.hostui", "nion.hostui.test"],
    install_requires=['numpy', 'nionutils>=0.3.19'],
    extras_require={
        'test': ['pytest'],
    },
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
    ],
    test_suite="nion.hostui.test",
)
