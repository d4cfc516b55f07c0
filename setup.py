from setuptools import setup, find_packages

setup(
    name="netsimplify",
    version="1.0",
    description="Candidacy and simplification of entities for the visualization of metabolic networks",
    long_description=("Evaluates which reactions and metabolites of a COBRApy model are eligible for representation "
                      "in a network of a context of interest, collapses redundant replicate reactions and manages "
                      "explicit and implicit designations of entities for simplification"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["netsimplify", "netsimplify.*"]),
    install_requires=["cobra", "numpy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Bio-Informatics"
    ],
    keywords=["metabolism", "constraint-based", "network", "visualization", "simplification"],
    zip_safe=False,
)
