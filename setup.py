from setuptools import setup, find_packages

setup(
    name="MunsellColor",
    version="0.1.0",
    description="Munsell colour notation arithmetic, gamut checking and matching against the renotation data",
    author="Jessica Lee",
    packages=find_packages(include=["MunsellColor", "MunsellColor.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "colour-science>=0.4.5",
        "numpy>=2.2.0",
        "pandas>=2.2.3",
        "scipy>=1.14.1",
        "setuptools>=75.1.0",
        "tqdm>=4.67.0",
    ],  # Core dependencies
    extras_require={
        "test": ["pytest>=8.0"],
    },
)
