from setuptools import setup, find_packages

setup(
    name="cooklang_indexer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cooklang_indexer": ["templates/*.html", "templates/*.css"]},
    description="Generates an HTML ingredient index for a collection of Cooklang recipes.",
    python_requires=">=3.10",
    install_requires=["cooklang-py", "jinja2", "marko", "pyyaml"],
    extras_require={
        "test": ["pytest", "lxml"],
        "docs": ["sphinx", "numpydoc"],
    },
    entry_points={
        "console_scripts": [
            "cooklang-index=cooklang_indexer.scripts.cooklang_index:main",
        ],
    },
)
