from setuptools import setup, find_packages

setup(
    name="gotopts",
    version="1.0.0",
    description="Parse shell script command line options and arguments.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Spencer James",
    url="https://github.com/kokoabim/gotopts",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "gotopts = gotopts.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
        "Topic :: System :: Shells",
    ],
)
