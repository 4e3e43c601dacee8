import pytest

from sint7.fragments import (
    ACTIVE_SECONDS,
    CATALOGUE,
    Feeling,
    FragmentStore,
    MemoryFragment,
)
from sint7.geometry import Rect


def _hitbox_at(x, y):
    return Rect(x, y, 80, 80)


def test_init_phase_selects_fragments():
    store = FragmentStore()
    store.init_phase(1)
    assert store.current_required.content == store.required[0].content
    assert store.current_required.phase == 1
    assert store.current_optional.content == CATALOGUE[0][0]
    assert store.current_optional.feeling is Feeling.OBEDIENCE


def test_init_phase_sets_texture_paths():
    store = FragmentStore()
    store.init_phase(2)
    assert store.required[1].texture == "assets/fragmentos/background-frag/obrigatorios/002.png"
    assert store.optional[1].texture == "assets/fragmentos/background-frag/bg-opc.png"


def test_init_phase_rejects_unknown_phase():
    store = FragmentStore()
    with pytest.raises(ValueError):
        store.init_phase(0)
    with pytest.raises(ValueError):
        store.init_phase(5)


def test_optional_phases_follow_index():
    store = FragmentStore()
    store.init_phase(1)
    assert [f.phase for f in store.optional] == list(range(len(store.optional)))
    assert not any(f.required for f in store.optional)


def test_collecting_required_fragment():
    store = FragmentStore()
    hints = store.check_collisions(_hitbox_at(550, 350), True, now=10.0)
    assert store.required[0].collected
    assert len(store.collected) == 1
    assert store.required_active
    assert store.activated_at == 10.0
    assert (560.0, 320.0) in hints


def test_fragment_collected_only_once():
    store = FragmentStore()
    store.check_collisions(_hitbox_at(550, 350), True, now=1.0)
    store.check_collisions(_hitbox_at(550, 350), True, now=2.0)
    assert len(store.collected) == 1


def test_no_collision_no_hints():
    store = FragmentStore()
    hints = store.check_collisions(_hitbox_at(-500, -500), True, now=0.0)
    assert hints == []
    assert store.collected == []


def test_touch_without_interact_does_not_collect():
    store = FragmentStore()
    hints = store.check_collisions(_hitbox_at(550, 350), False, now=0.0)
    assert len(hints) == 1
    assert not store.required[0].collected


def test_expire_after_active_seconds():
    store = FragmentStore()
    store.check_collisions(_hitbox_at(550, 350), True, now=100.0)
    store.expire(100.0 + ACTIVE_SECONDS - 0.1)
    assert store.required_active
    store.expire(100.0 + ACTIVE_SECONDS)
    assert not store.required_active


def test_optional_collection_counts():
    store = FragmentStore()
    store.init_phase(1)
    store.check_collisions(_hitbox_at(770, 350), True, now=0.0)
    assert store.optional[0].collected
    assert store.optional_active
    assert store.optional_count == 1
    assert store.optional_title() == "Fragmento de Memória 901"


def test_init_phase_resets_optional_collection():
    store = FragmentStore()
    store.check_collisions(_hitbox_at(770, 350), True, now=0.0)
    store.init_phase(1)
    assert not store.optional[0].collected


def test_collect_stores_snapshot():
    store = FragmentStore()
    fragment = MemoryFragment("texto", 1)
    store.collect(fragment)
    fragment.content = "outro"
    assert store.collected[0].content == "texto"


def test_describe_empty():
    assert FragmentStore().describe() == "Nenhum fragmento coletado."


def test_describe_lists_collected():
    store = FragmentStore()
    store.check_collisions(_hitbox_at(550, 350), True, now=0.0)
    text = store.describe()
    assert text.startswith("Fragmentos coletados:")
    assert "Fragmento 1:" in text
    assert "  Obrigatório: Sim" in text
    assert "  Posição: (550.00, 350.00)" in text