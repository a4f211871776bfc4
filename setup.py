""" weierstrass build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import weierstrass

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=weierstrass.name,
    version=weierstrass.__version__,
    license=weierstrass.__license__,
    author=weierstrass.__author__,
    author_email=weierstrass.__author_email__,
    description="Elliptic curve arithmetic for short Weierstrass curves over Fp",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"weierstrass": ["data/*.json"]},
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "test": ["pytest", "coincurve"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    keywords="elliptic-curves weierstrass ecdh bn128 secp256k1 modular-inverse",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
