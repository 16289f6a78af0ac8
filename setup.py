from setuptools import setup


with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="pairplots",
    version='0.1.0',
    author="Patrick Leser",
    author_email="patrick.e.leser@nasa.gov",
    description="Corner (pair) plots of multi-dimensional samples with credible-region contours.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/nasa/SMCPy",
    packages=["pairplots", "pairplots.utils"],
    install_requires=[
        "numpy",
        "matplotlib",
        "contourpy",
        "scipy",
        "pandas",
        "seaborn",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    python_requires=">=3.7",
    license="NOSA v1.3",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
    ],
)
