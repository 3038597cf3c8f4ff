# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="iseries-launcher",
    version="1.2.0",
    description="Launcher that picks the bundled x32/x64 JRE and starts I-Series",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["iseries_launcher*"]),
    package_data={
        "iseries_launcher": ["interface/locales/*.json"],
    },
    install_requires=[
        "customtkinter",  # Blocking alert dialogs
    ],
    extras_require={
        "test": ["pytest"],
        "build": ["pyinstaller"],
    },
    entry_points={
        'console_scripts': [
            'iseries-launcher=iseries_launcher.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
