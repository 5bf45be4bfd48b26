from setuptools import find_packages, setup


setup(
    name="bracetpl",
    version="0.1.0",
    description="Double-brace template tokenizer and nested-context renderer",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
