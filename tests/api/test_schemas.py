import importlib.util
import warnings

import skyadmin.api.schemas as schemas
from skyadmin.api.schemas import EmployeeOut


def test_schemas_module_defines_models_without_deprecation_warnings():
    spec = importlib.util.spec_from_file_location("_schemas_copy", schemas.__file__)
    module = importlib.util.module_from_spec(spec)

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        spec.loader.exec_module(module)

    assert module.EmployeeOut.model_config["populate_by_name"] is True


def test_employee_out_serializes_camel_case():
    out = EmployeeOut(id=1, username="admin", name="Admin", status=1, id_number="x")

    dumped = out.model_dump(by_alias=True)

    assert dumped["idNumber"] == "x"
    assert "id_number" not in dumped
