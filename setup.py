from setuptools import find_packages, setup

with open("fritzer/version.py") as f:
    exec(f.read())

setup(
    name="fritzer",
    version=__version__,  # type: ignore # noqa: F821
    description="Python API and command-line tool for the AVM Home Automation (AHA) HTTP interface",
    url="https://github.com/hschink/fritzer",
    author="",
    author_email="",
    license="MIT",
    packages=find_packages(include=["fritzer", "fritzer.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "asyncclick>=8.4",
        "defusedxml>=0.7",
        "mashumaro>=3.11",
        "rich>=13",
        "yarl>=1.9",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "pytest-asyncio>=0.23",
            "pytest-mock>=3.12",
        ],
    },
    python_requires=">=3.11",
    entry_points={"console_scripts": ["fritzer=fritzer.cli.main:cli"]},
    zip_safe=False,
)
