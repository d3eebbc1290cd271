# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="diaspora-picker",
    version="1.2.0",
    description="Tri-level checkbox pickers for volunteer expertise and African locations",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["diaspora_picker*"]),
    package_data={
        "diaspora_picker": [
            "resources/*.json",
            "interface/locales/*.json",
        ],
    },
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # GUI
        "requests",  # Profile store client
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'diaspora-picker=diaspora_picker.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
