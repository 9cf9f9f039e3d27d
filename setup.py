from setuptools import find_packages, setup

pypi_classifiers = [
    'Programming Language :: Python :: 3',
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Operating System :: OS Independent",
    'Intended Audience :: Science/Research',
    'Natural Language :: English',
    'Topic :: Scientific/Engineering :: Bio-Informatics',
    "Topic :: Software Development :: Libraries :: Python Modules",
    'License :: OSI Approved :: MIT License',
]

desc = """Streaming validation of FASTA files against SARS-CoV-2 genome submission rules."""

setup(name='fastacheck',
      version='0.1.0',
      description=desc,
      license='MIT',
      package_dir={'': 'src'},
      packages=find_packages(where='src'),
      python_requires='>=3.8',
      install_requires=[
          'biopython',
          'click',
          'rich',
      ],
      extras_require={
          'tests': ['pytest'],
      },
      classifiers=pypi_classifiers,
      keywords=["fasta", "validation", "sars-cov-2", "genbank"],
      include_package_data=True,
      zip_safe=False,
      entry_points={
        'console_scripts': [
            'fastacheck=fastacheck.cli:main',
        ],
    },
    )
