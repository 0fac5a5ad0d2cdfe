# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirstat",
    version="0.1.0",
    description="Quickly gather and print directory entry statistics",
    author="Walter G Davies",
    license="MIT",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirstat", "dirstat.*"]),
    package_data={"dirstat": ["interface/locales/*.json"]},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'dirstat=dirstat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
