from setuptools import setup, find_namespace_packages

setup(
    name="lagrangefe",
    version="1.0",
    description="Lagrange interpolating polynomials for free energy estimates",
    author="marcu",
    packages=find_namespace_packages(include=["lagrangefe*"]),
    install_requires=["numpy", "polars", "tqdm", "plotly"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["lagrangefe=lagrangefe.cli:main"]},
)
