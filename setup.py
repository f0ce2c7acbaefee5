from setuptools import setup, find_packages

setup(
    name="slide2048",
    version="0.1.0",
    packages=find_packages(include=["slide2048", "slide2048.*"]),
    install_requires=[
        "gymnasium",
        "numpy",
    ],
    entry_points={
        "console_scripts": [
            "slide2048=slide2048.play:main",
        ],
    },
)
