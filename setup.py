from pathlib import Path
from setuptools import setup, find_packages

HERE = Path(__file__).parent
VERSION_FILE = HERE / "VERSION"
version = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "1.0.0"

setup(
    name="dqprofile",
    version=version,
    description="Column completeness, sample values and date-range profiling for tabular data",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3",
        "numpy>=1.20",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["dqprofile=dqprofile.cli:main"],
    },
)
