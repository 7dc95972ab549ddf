import setuptools

setuptools.setup(
    name="raysketch",
    version="0.2.0",
    author="Michael J Hayford",
    author_email="mjhoptics@gmail.com",
    description="Aperture and cone angle constraints for schematic optical "
                "layouts",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'schematic', 'optical layout',
              'aperture', 'cone angle'],
    install_requires=[
        "numpy>=1.15.0",
        "json_tricks>=3.12.1",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        "anytree>=2.8.0",
        "packaging>=20.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
)
