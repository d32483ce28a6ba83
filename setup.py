from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="reportcore",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="Report periods and intermediate table registry for web analytics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/reportcore",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'reportcore': ['data/*.yaml', 'data/translations/*.yaml'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.3.0",
        "python-dateutil>=2.8.0",
        "isoweek>=1.3.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
