import setuptools

setuptools.setup(
    name='partition_generator',
    description='constant amortized time generator of integer partitions',
    version="0.1.0",
    license='MIT',
    python_requires='>=3.6',
    install_requires=['sympy'],
    extras_require={'test': ['pytest']},
    packages=setuptools.find_packages(exclude=('tests',))
)
