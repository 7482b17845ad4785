from setuptools import setup, find_packages

# Read the contents of the README file
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()
with open("LICENSE", "r", encoding="utf-8") as fh:
    license = fh.readline().strip()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements_lines = fh.read().splitlines()
requirements = []
for item in requirements_lines:
    if item.strip():
        requirements.append(item)

setup(
    name="iaunut",
    version="1.0",
    license=license,
    author="Geoscience Australia",
    author_email="GNSSAnalysis@ga.gov.au",
    description="Nutation of the Earth's rotation axis (IAU 1980 and IAU 2000A)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        f"License :: OSI Approved :: {license}",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6",  # Python version compatibility
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "iaunut =iaunut.__main__:main",
        ],
    },
    include_package_data=True,
    package_data={
        "": ["*.yaml"],
    },
)
