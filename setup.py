from setuptools import setup, find_namespace_packages

setup(
    name="PredPreyField",
    version="0.1",
    packages=find_namespace_packages(where="src", include=["predprey*"]),
    package_dir={"": "src"},
    description="Predator-prey simulation on a bounded grid field, with aging, breeding, hunting and starvation.",
    author="P. van Doesburg",
    author_email="petervandoesburg11@gmail.com",
    install_requires=[
        "numpy",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
