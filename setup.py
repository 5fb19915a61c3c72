# setup.py
from setuptools import setup, find_packages

setup(
    name="blisp",
    version="0.1.0",
    description="A minimal Lisp core: reader, evaluator, environments and integer builtins",
    packages=find_packages(include=["blisp", "blisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["blisp=blisp.__main__:main"],
    },
    zip_safe=False,
)
