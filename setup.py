# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeseed",
    version="0.1.0",
    description="Grow real directories and files from a `tree` diagram or its JSON output",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeseed", "treeseed.*"]),
    package_data={"treeseed.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "pyperclip",  # Lectura del portapapeles (--clipboard)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeseed=treeseed.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
