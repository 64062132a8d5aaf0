from setuptools import setup, find_packages


setup(
    name="siebns",
    version="2.0.0",
    packages=find_packages(),
    description="Fix the encoded file size in Siebel Gateway Name Server backing files after manual edits.",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "siebnsfix=siebns.cli:main",
        ]
    },
)
