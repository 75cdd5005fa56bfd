from setuptools import find_packages, setup

# use the contents of the README file as the 'long description' for the package
with open("./README.md", "r") as fh:
    long_description = fh.read()

#
# build the package
#
setup(
    name="rangeoverlap",
    version="0.1.0",
    description="Classification of overlap between bounded and unbounded ranges",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where=".", include=["rangeoverlap", "rangeoverlap.*"]),
    python_requires=">=3.8",
    install_requires=["numpy", "pandas"],
    extras_require=dict(tests=["pytest>=7"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
