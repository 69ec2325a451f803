# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="foldersnap",
    version="0.1.0",
    description="Snapshot a folder's structure and file contents as a JSON tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldersnap*"]),
    python_requires=">=3.9",
    install_requires=[
        "python-dotenv",
        "customtkinter",  # Native folder picker when no root path is given
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'foldersnap=foldersnap.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
