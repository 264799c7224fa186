from setuptools import setup, find_packages

setup(
    name='fina',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points={
        'console_scripts': [
            'fina=fina.cli:main',
        ],
    },
    description='Stateless numeric kernels for statistics and machine-learning preprocessing.',
    author='Jason Orender',
    author_email='jason@orender.net',
)
