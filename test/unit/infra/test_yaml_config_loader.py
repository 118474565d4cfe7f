"""YamlConfigLoader 유닛 테스트."""

import pytest
import yaml

from cargo_fleet.domain.enums import VehicleKind
from cargo_fleet.domain.exceptions import FleetConfigError
from cargo_fleet.domain.value_objects.cargo_type import (
    Bulk,
    Fragile,
    Perishable,
)
from cargo_fleet.infra.config.yaml_config_loader import (
    DEFAULT_CONFIG_PATH,
    YamlConfigLoader,
)


def write_yaml(path, data):
    with open(path, 'w') as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def config_yaml(tmp_path):
    """임시 fleet.yaml 파일을 생성한다."""
    data = {
        'cargo_fleet': {
            'fleet_name': 'test_fleet',
            'vehicles': [
                {
                    'kind': 'vehicle',
                    'make': 'Skoda',
                    'model': 'Octavia',
                    'year': 2019,
                    'capacity': 300,
                    'fuel_tank_capacity': 60,
                },
                {
                    'kind': 'truck',
                    'make': 'Volvo',
                    'model': 'FH',
                    'year': 2020,
                    'capacity': 5000,
                    'fuel_tank_capacity': 200,
                    'allowed_cargo_types': [
                        'fragile:hardcase', 'perishable:-10',
                    ],
                    'trailer_attached': True,
                    'trailer_capacity': 2000,
                    'trailer_allowed_cargo_types': ['bulk'],
                },
            ],
            'cargo': [
                {'description': 'Sand', 'weight': 1000, 'type': 'bulk'},
                {'description': 'Ghost', 'weight': 0, 'type': 'fragile'},
            ],
            'routes': [100, 300],
            'checker': {'unload_after_success': False},
        },
    }
    return write_yaml(tmp_path / 'fleet.yaml', data)


class TestYamlConfigLoader:
    """YamlConfigLoader 테스트."""

    def test_load_fleet_name(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()
        assert config.fleet_name == 'test_fleet'

    def test_load_vehicle(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()

        skoda = config.vehicles[0]
        assert skoda.kind == VehicleKind.VEHICLE
        assert skoda.capacity == 300
        assert skoda.fuel_tank_capacity == 60.0
        assert skoda.allowed_cargo_types is None

    def test_load_truck(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()

        volvo = config.vehicles[1]
        assert volvo.kind == VehicleKind.TRUCK
        assert volvo.allowed_cargo_types == (
            Fragile(in_hardcase=True), Perishable(temperature_c=-10),
        )
        assert volvo.trailer_attached is True
        assert volvo.trailer_capacity == 2000
        assert volvo.trailer_allowed_cargo_types == (Bulk(),)

    def test_load_cargo_keeps_invalid_weight(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()

        assert [c.description for c in config.cargo] == ['Sand', 'Ghost']
        assert config.cargo[1].weight == 0

    def test_load_routes_and_checker(self, config_yaml):
        config = YamlConfigLoader(config_yaml).load()

        assert config.routes == (100, 300)
        assert config.checker.unload_after_success is False

    def test_top_level_without_section(self, tmp_path):
        path = write_yaml(tmp_path / 'flat.yaml', {'routes': [5]})
        config = YamlConfigLoader(path).load()
        assert config.routes == (5,)

    def test_load_nonexistent_file(self, tmp_path):
        """존재하지 않는 파일이면 기본값을 사용한다."""
        config = YamlConfigLoader(tmp_path / 'nonexistent.yaml').load()

        assert config.fleet_name == 'cargo_fleet'
        assert config.vehicles == ()
        assert config.checker.unload_after_success is True

    def test_load_invalid_yaml(self, tmp_path):
        """매핑이 아닌 YAML이면 기본값을 사용한다."""
        path = tmp_path / 'bad.yaml'
        with open(path, 'w') as f:
            f.write('just a string')
        config = YamlConfigLoader(path).load()
        assert config.vehicles == ()

    def test_missing_vehicle_key_raises(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'vehicles': [{'make': 'Ford', 'model': 'Transit'}],
        })
        with pytest.raises(FleetConfigError, match="capacity"):
            YamlConfigLoader(path).load()

    def test_unknown_vehicle_kind_raises(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'vehicles': [{
                'kind': 'boat', 'make': 'A', 'model': 'B', 'year': 1,
                'capacity': 1, 'fuel_tank_capacity': 1,
            }],
        })
        with pytest.raises(FleetConfigError, match="boat"):
            YamlConfigLoader(path).load()

    def test_cargo_without_type_raises(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'cargo': [{'description': 'Sand', 'weight': 10}],
        })
        with pytest.raises(FleetConfigError, match="type"):
            YamlConfigLoader(path).load()

    def test_non_numeric_value_raises(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'routes': ['far'],
        })
        with pytest.raises(FleetConfigError, match="변환"):
            YamlConfigLoader(path).load()

    def test_checker_must_be_mapping(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {'checker': ['unload']})
        with pytest.raises(FleetConfigError, match="checker"):
            YamlConfigLoader(path).load()

    def test_string_flag_is_rejected(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'checker': {'unload_after_success': 'false'},
        })
        with pytest.raises(FleetConfigError, match="unload_after_success"):
            YamlConfigLoader(path).load()

    def test_string_trailer_attached_is_rejected(self, tmp_path):
        path = write_yaml(tmp_path / 'f.yaml', {
            'vehicles': [{
                'kind': 'truck', 'make': 'A', 'model': 'B', 'year': 1,
                'capacity': 1, 'fuel_tank_capacity': 1,
                'trailer_attached': 'no',
            }],
        })
        with pytest.raises(FleetConfigError, match="trailer_attached"):
            YamlConfigLoader(path).load()


class TestDefaultConfig:
    def test_bundled_sample_fleet(self):
        assert DEFAULT_CONFIG_PATH.exists()

        config = YamlConfigLoader().load()

        assert [f"{v.make} {v.model}" for v in config.vehicles] == [
            "Ford Transit", "Skoda Octavia", "Volvo FH", "Toyota Tacoma",
        ]
        assert len(config.cargo) == 4
        assert config.routes == (100, 300, 700)
