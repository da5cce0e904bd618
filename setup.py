import setuptools

#Genrate long description using readme file
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="ppgeomag",
    version="1.0.0",
    author="Karl Laundal",
    author_email="readme@file.md",
    description="Pure Python World Magnetic Model in Earth-centered Cartesian coordinates",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
    install_requires=[
        'numpy>=1.20',
        'pandas>=1.3.5'
    ],
    extras_require={
        'test': ['pytest'],
    },
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.8",
)
