from setuptools import find_packages, setup

setup(
    name="pycollect",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    license="MIT License",
    description="Immutable, chainable collections for Python",
    install_requires=[
        "attrs>=22.2.0",
        "pyrsistent>=0.18.0",
        "typing-extensions>=4.7.0",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.0",
            "pytest>=7.0",
        ],
    },
)
