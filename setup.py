# setup.py
from setuptools import setup, find_packages

setup(
    name="atomlisp",
    version="0.3.0",
    description="Evaluation core of a small Lisp: closures, macros, quasiquote and loop/recur",
    packages=find_packages(include=["atomlisp", "atomlisp.*"]),
    package_data={"atomlisp": ["prelude/*.lisp"]},
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["atomlisp=atomlisp.__main__:main"],
    },
    zip_safe=False,
)
