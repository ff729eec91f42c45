import pytest

from app.domain.errors import (
    AmbiguousLicencePlateError,
    InvalidLicencePlateError,
    LicencePlateValidationError,
    ValidationErrorKind,
)
from app.domain.licence_plate import FederalPoliceVehicleType, PlateCategory


class TestExamples:
    def test_segmented_civilian_plate(self, service):
        plate = service.validate_licence_plate("W-SE515")

        assert plate.distinguisher.code == "W"
        assert plate.identifier == "SE"
        assert plate.number == "515"
        assert plate.modifier == ""
        assert plate.render() == "W-SE515"

    def test_unsegmented_civilian_plate(self, service):
        plate = service.validate_licence_plate("SGWP100")

        assert plate.distinguisher.code == "SG"
        assert plate.identifier == "WP"
        assert str(plate) == "SG-WP100"

    def test_two_valid_splits_are_ambiguous(self, service):
        with pytest.raises(AmbiguousLicencePlateError, match="mehrdeutig") as exc_info:
            service.validate_licence_plate("LIT433")

        assert exc_info.value.kind is ValidationErrorKind.AMBIGUOUS

    def test_bnn1234_is_ambiguous(self, service):
        with pytest.raises(AmbiguousLicencePlateError):
            service.validate_licence_plate("BNN1234")

    def test_separator_removes_ambiguity(self, service):
        assert service.validate_licence_plate("B-NN 1234").render() == "B-NN1234"
        assert service.validate_licence_plate("BN-N1234").render() == "BN-N1234"
        assert service.validate_licence_plate("LI T433").render() == "LI-T433"

    def test_lowercase_and_spaces(self, service):
        plate = service.validate_licence_plate(" me ab 3333 ")

        assert plate.render() == "ME-AB3333"

    def test_forbidden_identifier(self, service):
        with pytest.raises(InvalidLicencePlateError, match="SS") as exc_info:
            service.validate_licence_plate("W-SS88")

        assert exc_info.value.kind is ValidationErrorKind.INVALID_FORMAT

    def test_dealer_plate_without_separator(self, service):
        plate = service.validate_licence_plate("B06123")

        assert plate.distinguisher.code == "B"
        assert plate.identifier == ""
        assert plate.number == "06123"
        assert plate.modifier == ""
        assert plate.category is PlateCategory.RED_PLATE
        assert plate.render() == "B-06123"

    def test_special_plate_renders_without_hyphen(self, service):
        plate = service.validate_licence_plate("Y123456")

        assert plate.category is PlateCategory.BUNDESWEHR
        assert plate.identifier == ""
        assert plate.render() == "Y123456"

    def test_red_test_drive_plate_rejects_modifier(self, special_service):
        with pytest.raises(InvalidLicencePlateError):
            special_service.validate_licence_plate("BP0650E")


class TestRedPlates:
    @pytest.mark.parametrize(
        "text, rendered",
        [
            ("B-06123", "B-06123"),
            ("ME-061234", "ME-061234"),
            ("B07456", "B-07456"),
            ("B-07456", "B-07456"),
            ("B05789", "B-05789"),
            ("W-051234", "W-051234"),
        ],
    )
    def test_valid(self, service, text, rendered):
        assert service.validate_licence_plate(text).render() == rendered

    @pytest.mark.parametrize(
        "text",
        ["B-0612345", "B-061234H", "ME-071234H", "W-051234E", "B08123", "B04123"],
    )
    def test_invalid(self, service, text):
        with pytest.raises(InvalidLicencePlateError):
            service.validate_licence_plate(text)


class TestSpecialPlates:
    def test_federal_police_electric(self, special_service):
        plate = special_service.validate_licence_plate("BP6012E")

        assert plate.modifier == "E"
        assert plate.vehicle_type is FederalPoliceVehicleType.ELECTRIC_VEHICLES
        # special plates render as code + number only
        assert plate.render() == "BP6012"

    def test_federal_police_electric_without_modifier(self, special_service):
        with pytest.raises(InvalidLicencePlateError):
            special_service.validate_licence_plate("BP6012")

    @pytest.mark.parametrize("text", ["BP151H", "BP151E", "BP09123", "BP151234"])
    def test_federal_police_invalid(self, special_service, text):
        with pytest.raises(InvalidLicencePlateError):
            special_service.validate_licence_plate(text)

    @pytest.mark.parametrize("text, rendered", [("THW8234", "THW8234"), ("THW-85000", "THW85000"), ("THW 0650", "THW0650")])
    def test_thw(self, special_service, text, rendered):
        assert special_service.validate_licence_plate(text).render() == rendered

    @pytest.mark.parametrize("text", ["THW7000", "THW800", "THW8234H"])
    def test_thw_invalid(self, special_service, text):
        with pytest.raises(InvalidLicencePlateError):
            special_service.validate_licence_plate(text)

    @pytest.mark.parametrize("text", ["X1", "X123456", "BD12"])
    def test_numeric_special(self, special_service, text):
        assert special_service.validate_licence_plate(text).render() == text

    @pytest.mark.parametrize("text", ["X1234567", "XAB123", "X123H", "Y1H"])
    def test_numeric_special_invalid(self, special_service, text):
        with pytest.raises(InvalidLicencePlateError):
            special_service.validate_licence_plate(text)


class TestRejections:
    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank(self, service, text):
        with pytest.raises(InvalidLicencePlateError, match="leer"):
            service.validate_licence_plate(text)

    @pytest.mark.parametrize("text", ["W_SE515", "MÜ-AB12", "B-AB12?"])
    def test_charset(self, service, text):
        with pytest.raises(InvalidLicencePlateError):
            service.validate_licence_plate(text)

    @pytest.mark.parametrize("text", ["QQ-AB12", "QQAB12"])
    def test_unknown_distinguisher(self, service, text):
        with pytest.raises(InvalidLicencePlateError, match="Unbekanntes"):
            service.validate_licence_plate(text)

    @pytest.mark.parametrize("text", ["W-ABC12", "W-AB12345", "W", "W-"])
    def test_no_valid_parsing(self, service, text):
        with pytest.raises(InvalidLicencePlateError):
            service.validate_licence_plate(text)

    @pytest.mark.parametrize("text", ["N-S12", "S-A1", "S-D 99"])
    def test_forbidden_pairs(self, service, text):
        with pytest.raises(InvalidLicencePlateError, match="Kombination"):
            service.validate_licence_plate(text)

    @pytest.mark.parametrize("identifier", ["HJ", "KZ", "NS", "SA", "SS"])
    @pytest.mark.parametrize("code", ["B", "ME", "W"])
    def test_forbidden_identifiers_for_any_distinguisher(self, service, code, identifier):
        with pytest.raises(InvalidLicencePlateError):
            service.validate_licence_plate(f"{code}-{identifier}12")

    def test_errors_share_base_class(self, service):
        for text in ("LIT433", "W-SS88"):
            with pytest.raises(LicencePlateValidationError):
                service.validate_licence_plate(text)


class TestProperties:
    @pytest.mark.parametrize("text", ["SGWP100", "W-SE515", "ME AB 3333", "B06123", "li-t433h", "BN N1234E"])
    def test_rendered_plate_validates_to_the_same_plate(self, service, text):
        plate = service.validate_licence_plate(text)

        assert service.validate_licence_plate(plate.render()) == plate

    def test_separator_input_only_looks_up_the_given_prefix(self, service, lookup):
        service.validate_licence_plate("L-IT433")

        assert lookup.requested_codes == ["L"]

    def test_unsegmented_input_looks_up_all_prefix_lengths(self, service, lookup):
        with pytest.raises(AmbiguousLicencePlateError):
            service.validate_licence_plate("LIT433")

        assert lookup.requested_codes == ["L", "LI", "LIT"]

    def test_single_structurally_valid_split_is_accepted(self, service):
        # "BN" + "1234" is neither civilian nor a red plate, so only "B" + "N1234" remains
        assert service.validate_licence_plate("BN1234").render() == "B-N1234"

    def test_no_structurally_valid_split(self, service):
        with pytest.raises(InvalidLicencePlateError):
            service.validate_licence_plate("LIT43355")
