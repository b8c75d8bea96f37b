from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='connect_four_arcade',
    version='0.1.0',
    keywords='connect four game pygame arcade',
    description='A windowed Connect Four game with a title screen, two-player and computer modes, and a simple AI.',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3.9',
    'Topic :: Games/Entertainment :: Board Games',
    ],
    license='MIT',
    python_requires='>=3.9',
    packages=[
        'connect_four_arcade'
    ],
    install_requires=[
        'codetiming',
        'pygame',
    ],
    extras_require={
        'test': ['pytest'],
    },
    scripts=['bin/c4-arcade'],
    include_package_data=True,
    zip_safe=False)
