# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

import copy

import pytest

from sham.config import Configuration
from sham.core import VerificationFailure
from sham.kernel import Kernel
from sham.proxy import (Anything, AnythingClassProxy, ClassProxy,
                        InstanceProxy)
from sham.stub import Behavior, Value
from sham.util import qualified_name


class Model(object):
    table = 'models'

    def save(self):
        return True


class User(Model):
    def __init__(self, name='jon'):
        self.name = name

    def get_name(self):
        return self.name

    def set_name(self, name):
        self.name = name

    def load(self, id, fresh=False):
        if id < 0:
            raise KeyError(id)
        return id


def setup_function():
    global kernel
    kernel = Kernel()


def teardown_function():
    kernel.clean()


def test_verify_invoked():
    user = kernel.double(User())
    user.get_name()
    user.verify_invoked('get_name')
    user.verify_invoked('get_name', [])
    with pytest.raises(VerificationFailure) as e:
        user.verify_invoked('set_name')
    assert str(e.value) == ('Expected %s.set_name to be invoked but it never '
                            'occurred.' % qualified_name(User))


def test_verify_invoked_with_arguments():
    user = kernel.double(User())
    user.load(1, fresh=True)
    user.verify_invoked('load', [1])
    user.verify_invoked('load', kwargs={'fresh': True})
    user.verify_invoked('load', [1], {'fresh': True})
    with pytest.raises(VerificationFailure) as e:
        user.verify_invoked('load', [2])
    assert "load(2) to be invoked" in str(e.value)
    assert 'Recorded calls:\n  load(1, fresh=True)' in str(e.value)
    with pytest.raises(VerificationFailure):
        user.verify_invoked('load', [1], {})


def test_verify_invoked_counts():
    user = kernel.double(User())
    user.set_name('a')
    user.set_name('b')
    user.set_name('a')
    user.verify_invoked_multiple_times('set_name', 3)
    user.verify_invoked_multiple_times('set_name', 2, ['a'])
    user.verify_invoked_once('set_name', ['b'])
    with pytest.raises(VerificationFailure) as e:
        user.verify_invoked_once('set_name')
    assert 'invoked 1 times but it was invoked 3 times' in str(e.value)


def test_verify_never_invoked():
    user = kernel.double(User())
    user.verify_never_invoked('save')
    user.save()
    user.verify_never_invoked('save', ['force'])
    with pytest.raises(VerificationFailure) as e:
        user.verify_never_invoked('save')
    assert 'not to be invoked but it was' in str(e.value)


def test_failures_are_assertion_errors():
    user = kernel.double(User())
    with pytest.raises(AssertionError):
        user.verify_invoked('save')


def test_get_calls_for_method():
    user = kernel.double(User())
    user.set_name('a')
    user.set_name('b')
    assert user.get_calls_for_method('set_name') == [['a'], ['b']]
    assert user.get_calls_for_method('save') == []


def test_failure_lists_at_most_max_calls():
    kernel = Kernel(Configuration({'verify.max_calls': '2'}))
    try:
        user = kernel.double(User())
        for name in 'abcde':
            user.set_name(name)
        with pytest.raises(VerificationFailure) as e:
            user.verify_invoked('set_name', ['z'])
        message = str(e.value)
        assert "set_name('a')" in message
        assert "set_name('b')" in message
        assert "set_name('c')" not in message
        assert '... and 3 more' in message
    finally:
        kernel.clean()


def test_method_verifier_returned():
    user = kernel.double(User(), {'get_name': 'davert'})
    user.get_name()
    user.verify_method_invoked('get_name').returned('davert')
    with pytest.raises(VerificationFailure) as e:
        user.verify_method_invoked('get_name').returned('jon')
    assert "to return 'jon' but it returned 'davert'" in str(e.value)


def test_method_verifier_raised():
    user = kernel.double(User())
    user.load(1)
    with pytest.raises(KeyError):
        user.load(-1)
    user.verify_method_invoked('load').returned(1).raised(KeyError)
    with pytest.raises(VerificationFailure):
        user.verify_method_invoked('load').raised(ValueError)
    with pytest.raises(VerificationFailure):
        user.verify_method_invoked('save')


def test_class_proxy_introspection():
    users = kernel.double(User)
    assert isinstance(users, ClassProxy)
    assert users.get_class() is User
    assert users.class_name == qualified_name(User)
    assert users.is_defined()
    assert users.interfaces() == [qualified_name(Model)]
    assert users.parent() == qualified_name(Model)
    assert kernel.double(Model).parent() is None
    assert users.has_method('save')
    assert users.has_method('get_name')
    assert not users.has_method('table')
    assert not users.has_method('delete')
    assert users.has_property('table')
    assert not users.has_property('save')
    assert not users.has_property('delete')


def test_class_proxy_construct_and_make():
    users = kernel.double(User)
    user = users.construct('davert')
    assert user.get_name() == 'davert'
    made = users.make()
    assert isinstance(made, User)
    assert not hasattr(made, 'name')
    users.verify_invoked_once('get_name')


def test_class_proxy_sees_calls_on_every_instance():
    users = kernel.double(User)
    User('a').get_name()
    User('b').get_name()
    users.verify_invoked_multiple_times('get_name', 2)


def test_instance_proxy_forwards_to_object():
    user = User()
    proxy = kernel.double(user)
    assert isinstance(proxy, InstanceProxy)
    assert proxy.get_object() is user
    assert proxy.class_name == qualified_name(User)
    assert proxy.name == 'jon'
    proxy.name = 'davert'
    assert user.name == 'davert'
    proxy.age = 42
    assert user.age == 42
    del proxy.age
    assert not hasattr(user, 'age')
    assert 'name' not in vars(proxy)
    with pytest.raises(AttributeError):
        proxy.nickname


def test_instance_proxy_calls_object_methods():
    user = User()
    proxy = kernel.double(user, {'save': False})
    assert proxy.save() is False
    assert user.save() is False
    proxy.verify_invoked_multiple_times('save', 2)


def test_instance_proxy_copies_are_usable():
    user = User()
    proxy = copy.copy(kernel.double(user))
    user.get_name()
    proxy.verify_invoked('get_name')


def test_anything_class_proxy():
    ghosts = AnythingClassProxy(kernel, 'app.models.Ghost')
    assert ghosts.class_name == 'app.models.Ghost'
    assert not ghosts.is_defined()
    assert ghosts.interfaces() == []
    assert ghosts.parent() is None
    assert not ghosts.has_method('haunt')
    assert not ghosts.has_property('house')
    assert ghosts.get_calls_for_method('haunt') == []
    ghosts.verify_never_invoked('haunt')
    with pytest.raises(VerificationFailure):
        ghosts.verify_invoked('haunt')
    assert isinstance(ghosts.construct(1, two=2), Anything)
    assert isinstance(ghosts.make(), Anything)
    assert repr(ghosts.make()) == '<Anything app.models.Ghost>'


def test_anything_accepts_any_use():
    ghost = Anything('Ghost')
    assert isinstance(ghost.haunt(), Anything)
    assert isinstance(ghost.haunt().house['attic'].door, Anything)
    assert isinstance(ghost(1, 2, three=3), Anything)
    ghost.name = 'casper'
    assert isinstance(ghost.name, Anything)
    del ghost.name
    ghost['key'] = 'value'
    del ghost['key']
    assert list(ghost) == []
    assert [item for item in ghost.items] == []
    assert len(ghost) == 0
    assert 'key' not in ghost
    assert ghost
    assert int(ghost) == 0
    assert float(ghost) == 0.0
    with ghost as entered:
        assert entered is ghost
    assert str(ghost) == '~Anything~'
    assert repr(ghost) == '<Anything Ghost>'
    assert repr(Anything()).startswith('<Anything at 0x')


def test_anything_does_not_pretend_to_support_protocols():
    ghost = Anything()
    assert not hasattr(ghost, '__html__')
    assert not hasattr(ghost, '__fspath__')


def test_anything_can_be_copied():
    ghost = copy.copy(Anything('Ghost'))
    assert repr(ghost) == '<Anything Ghost>'
    assert isinstance(copy.deepcopy(ghost).haunt(), Anything)


def test_anything_evaluates_stubs():
    ghost = Anything('Ghost', {
        'get_name': Value('casper'),
        'haunt': Behavior(lambda self, house: (self, house)),
        })
    assert ghost.get_name() == 'casper'
    assert ghost.haunt('attic') == (ghost, 'attic')
    assert isinstance(ghost.get_age(), Anything)
