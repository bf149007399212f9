from setuptools import setup, find_packages

setup(
    name="D3Scatter",
    version="0.1.0",
    description="D3.js scatterplot in a Qt web view, fed with generated points",
    packages=find_packages(exclude=["UnitTest", "UnitTest.*", "Examples", "Examples.*"]),
    package_data={
        "D3Scatter": ["assets/html/*.html", "assets/js/*.js"],
    },
    include_package_data=True,
    install_requires=[
        # Pin 1.24.4 for Python < 3.12
        "numpy==1.24.4; python_version<'3.12'",
        # Allow newer NumPy for Python >= 3.12
        "numpy>=1.26.0; python_version>='3.12'",
        "PyQt5>=5.15.10",
        "PyQt5-sip>=12.15.0",
        "PyQtWebEngine>=5.15.6",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "d3scatter=D3Scatter.__main__:main",
        ],
    },
    python_requires=">=3.9",
)
