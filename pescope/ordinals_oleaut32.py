"""Names of functions exported by ordinal from the OLE Automation library."""

DLL_NAME = "oleaut32.dll"


def _build() -> dict[int, str]:
    names: dict[int, str] = {}

    def add(start: int, words: str, prefix: str = "") -> None:
        names.update(
            (start + i, prefix + word) for i, word in enumerate(words.split())
        )

    def family(start: int, target: str, sources: str) -> None:
        add(start, sources, f"Var{target}From")

    add(2, "SysAllocString SysReAllocString SysAllocStringLen "
           "SysReAllocStringLen SysFreeString SysStringLen")
    add(8, "VariantInit VariantClear VariantCopy VariantCopyInd "
           "VariantChangeType VariantTimeToDosDateTime DosDateTimeToVariantTime")
    add(15, "Create Destroy GetDim GetElemsize GetUBound GetLBound Lock Unlock "
            "AccessData UnaccessData GetElement PutElement Copy", "SafeArray")
    add(28, "DispGetParam DispGetIDsOfNames DispInvoke CreateDispTypeInfo "
            "CreateStdDispatch RegisterActiveObject RevokeActiveObject "
            "GetActiveObject")
    add(36, "AllocDescriptor AllocData DestroyDescriptor DestroyData Redim "
            "AllocDescriptorEx CreateEx CreateVectorEx SetRecordInfo "
            "GetRecordInfo", "SafeArray")
    add(46, "ParseNumFromStr NumFromParseNum", "Var")

    family(48, "I2", "UI1 I4 R4 R8 Cy Date Str Disp Bool")
    add(57, "SafeArraySetIID")
    family(58, "I4", "UI1 I2 R4 R8 Cy Date Str Disp Bool")
    add(67, "SafeArrayGetIID")
    family(68, "R4", "UI1 I2 I4 R8 Cy Date Str Disp Bool")
    add(77, "SafeArrayGetVartype")
    family(78, "R8", "UI1 I2 I4 R4 Cy Date Str Disp Bool")
    add(87, "VarFormat")
    family(88, "Date", "UI1 I2 I4 R4 R8 Cy Str Disp Bool")
    add(97, "VarFormatDateTime")
    family(98, "Cy", "UI1 I2 I4 R4 R8 Date Str Disp Bool")
    add(107, "VarFormatNumber")
    family(108, "Bstr", "UI1 I2 I4 R4 R8 Cy Date Disp Bool")
    add(117, "VarFormatPercent")
    family(118, "Bool", "UI1 I2 I4 R4 R8 Date Cy Str Disp")
    add(127, "FormatCurrency WeekdayName MonthName", "Var")
    family(130, "UI1", "I2 I4 R4 R8 Cy Date Str Disp Bool")

    add(139, "FormatFromTokens TokenizeFormatString Add And Div", "Var")
    add(144, "DllCanUnloadNow DllGetClassObject DispCallFunc "
             "VariantChangeTypeEx SafeArrayPtrOfIndex SysStringByteLen "
             "SysAllocStringByteLen DllRegisterServer")
    add(152, "Eqv Idiv Imp Mod Mul Or Pow Sub", "Var")
    add(160, "CreateTypeLib LoadTypeLib LoadRegTypeLib RegisterTypeLib "
             "QueryPathOfRegTypeLib LHashValOfNameSys LHashValOfNameSysA")
    add(167, "Xor Abs Fix", "Var")
    add(170, "OaBuildVersion ClearCustData")
    add(172, "Int Neg Not Round Cmp DecAdd DecDiv DecMul", "Var")
    add(180, "CreateTypeLib2")
    add(181, "DecSub DecAbs", "Var")
    add(183, "LoadTypeLibEx SystemTimeToVariantTime VariantTimeToSystemTime "
             "UnRegisterTypeLib")
    add(187, "DecFix DecInt DecNeg", "Var")
    family(190, "Dec", "UI1 I2 I4 R4 R8 Date Cy Str Disp Bool")
    add(200, "GetErrorInfo SetErrorInfo CreateErrorInfo")
    add(203, "DecRound DecCmp", "Var")

    for i, target in enumerate("I2 I4 R4 R8 Date Cy Bstr Bool UI1".split()):
        family(205 + 4 * i, target, "I1 UI2 UI4 Dec")
    family(241, "Dec", "I1 UI2 UI4")
    family(244, "I1", "UI1 I2 I4 R4 R8 Date Cy Str Disp Bool UI2 UI4 Dec")
    family(257, "UI2", "UI1 I2 I4 R4 R8 Date Cy Str Disp Bool I1 UI4 Dec")
    family(270, "UI4", "UI1 I2 I4 R4 R8 Date Cy Str Disp Bool I1 UI2 Dec")

    for start, prefix in ((283, "BSTR_"), (287, "VARIANT_"), (291, "LPSAFEARRAY_")):
        add(start, "UserSize UserMarshal UserUnmarshal UserFree", prefix)
    add(295, "Size Marshal Unmarshal", "LPSAFEARRAY_")

    add(298, "DecCmpR8 CyAdd", "Var")
    add(300, "DllUnregisterServer OACreateTypeLib2")
    add(303, "CyMul CyMulI4 CySub CyAbs CyFix CyInt CyNeg CyRound CyCmp "
             "CyCmpR8 BstrCat BstrCmp R8Pow R4CmpR8 R8Round Cat "
             "DateFromUdateEx", "Var")
    add(322, "GetRecordInfoFromGuids GetRecordInfoFromTypeInfo")
    add(325, "SetVarConversionLocaleSetting GetVarConversionLocaleSetting "
             "SetOaNoCache")
    add(329, "CyMulI8 DateFromUdate UdateFromDate", "Var")
    add(332, "GetAltMonthNames")

    family(333, "I8", "UI1 I2 R4 R8 Cy Date Str Disp Bool I1 UI2 UI4 Dec")
    family(346, "I2", "I8 UI8")
    family(348, "I4", "I8 UI8")
    for i, target in enumerate("R4 R8 Date Cy Bstr Bool UI1 Dec I1 UI2".split()):
        family(360 + 2 * i, target, "I8 UI8")

    add(401, "Ex FileEx", "OleLoadPicture")
    add(411, "SafeArrayCreateVector SafeArrayCopyData VectorFromBstr "
             "BstrFromVector")
    add(415, "IconToCursor CreatePropertyFrameIndirect CreatePropertyFrame "
             "LoadPicture CreatePictureIndirect CreateFontIndirect "
             "TranslateColor LoadPictureFile SavePictureFile LoadPicturePath",
        "Ole")
    family(425, "UI4", "I8 UI8")
    family(427, "I8", "UI8")
    family(428, "UI8", "I8 UI1 I2 R4 R8 Cy Date Str Disp Bool I1 UI2 UI4 Dec")
    add(442, "RegisterTypeLibForUser UnRegisterTypeLibForUser")
    return dict(sorted(names.items()))


ORDINAL_NAMES = _build()