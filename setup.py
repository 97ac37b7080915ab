from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="mcpspec",
    version="1.0.0",
    author="Scott Wilcox",
    author_email="example@example.com",  # Replace with actual email
    description="Declarative test collections and execution engine for Model Context Protocol (MCP) servers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/scottwilcox/mcpspec",
    project_urls={
        "Bug Tracker": "https://github.com/scottwilcox/mcpspec/issues",
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Operating System :: OS Independent",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
    ],
    packages=find_packages(include=["mcpspec", "mcpspec.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "jinja2>=3.0.0",
        "requests>=2.25.0",
        "jsonschema>=4.0.0",
        "pyyaml>=6.0",
        "sseclient-py>=1.7.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcpspec-run=mcpspec.scripts.run_tests:main",
        ],
    },
)
