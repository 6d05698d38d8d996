from setuptools import setup


setup(
    name='sham',
    url='http://github.com/alecthomas/sham',
    download_url='http://github.com/alecthomas/sham',
    version='0.5',
    description='Test doubles for any Python class or object.',
    license='BSD',
    platforms=['any'],
    packages=['sham'],
    author='Alec Thomas',
    author_email='alec@swapoff.org',
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'mock >= 0.5.0',
        ],
    },
    )
