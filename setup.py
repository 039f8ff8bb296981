from setuptools import find_packages, setup

setup(
    name="notelinks",
    version="0.1.0",
    description="Pagination link checker for static HTML note pages",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4",  # HTML parsing
        "soupsieve",  # CSS selectors (compiled once per run)
        "html5lib",  # HTML5 tree construction for BeautifulSoup
        "pydantic>=2",  # Config and output schemas
        "typer>=0.9",  # CLI
        "rich",  # Terminal formatting
        "pygments",  # Highlighted JSON/YAML output
        "pyyaml",  # YAML output
        "jinja2",  # Template rendering for CLI outputs
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "notelinks=notelinks.cli:main",
        ],
    },
)
