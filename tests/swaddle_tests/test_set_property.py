from swaddle import Swaddle


def test_setting_of_existing_property() -> None:
    swaddle = Swaddle.wrap_array({'reversed': True})

    swaddle.set_property('reversed', 'false')

    assert swaddle == Swaddle.wrap_array({'reversed': 'false'})


def test_setting_of_non_existent_property() -> None:
    swaddle = Swaddle.wrap_array({'used': True, 'user_count': 101})

    swaddle.set_property('likes', 3)

    assert swaddle == Swaddle.wrap_array(
        {'used': True, 'user_count': 101, 'likes': 3}
    )
    assert swaddle.property_names() == ['used', 'user_count', 'likes']


def test_setting_of_none() -> None:
    swaddle = Swaddle.wrap_array({'used': True})

    swaddle.set_property('used', None)

    assert not swaddle.has_property('used')
    assert swaddle.get_property('used', False) is False
