from setuptools import setup, find_packages

setup(
    name="pySamLabs",
    version="0.1.0",
    description="A Python package to control SAM Labs blocks via BLE.",
    author="tnl2rgn2",
    author_email="tnl2rgn2@example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),  # Automatically find all packages
    install_requires=[
        "bleak>=0.20",  # BleakClient(services=...)
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",  # asyncio.to_thread in the console chooser
)
