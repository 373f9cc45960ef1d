# setup.py
from setuptools import setup, find_packages

setup(
    name="world_disassembler",
    version="0.1.0",
    packages=find_packages(include=['world_disassembler', 'world_disassembler.*']),
    install_requires=[
        "construct>=2.10",
        "tqdm>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.7",
    description="A tool for disassembling legacy game engine .world files",
    keywords="world, disassembler, binary, game assets",
    entry_points={
        'console_scripts': [
            'disassemble-world=world_disassembler.main:main',
        ],
    }
)
