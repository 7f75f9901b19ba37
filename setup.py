from setuptools import setup
from yaap.const import VERSION_STR, DESCRIPTION

setup(
    name="yaap",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    author="Jérôme Velut",
    url="https://github.com/jeromevelut/yaap",
    packages=["yaap"],
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "yaap-demo = yaap.demo:main",
        ],
    },
    license="BSD-2-Clause",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
