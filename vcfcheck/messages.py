"""Built-in message templates, keyed by language and rule name.

Templates are Jinja2 strings rendered with the parameters each rule supplies.
"""

from .constants import Language

MESSAGES = {
    Language.EN: {
        "Global/BlankLine": "Blank line found. This line will be ignored.",
        "Global/DataBeforeHeader": (
            "Data line found before header line. This line will be ignored."
        ),
        "Global/EmptyVCF": "No records found in VCF.",
        "MetaInformation/FileFormat": (
            "A single `fileformat` line is always required, must be the first "
            "line in the file. Allowed values are {{allowed}}."
        ),
        "MetaInformation/Version": (
            "Unexpected VCF version. Expected values are {{allowed}}."
        ),
        "Header/HeaderLine": (
            "The header line is missing. The line starts with `#` is required."
        ),
        "Header/HeaderColumn": (
            "The header line names the 8 fixed, mandatory columns. "
            "These columns are as follows: {{columns}}."
        ),
        "Header/DuplicatedHeader": (
            "Multiple header lines starting with # were found. "
            "All but the first header will be ignored."
        ),
        "Record/AllowedReferenceBase": (
            "The reference sequence contains characters not allowed. "
            "Available characters are {{allowed}}."
        ),
        "Record/AllowedAlternateBase": (
            "The alternate sequence contains characters not allowed. "
            "Available characters are {{allowed}}."
        ),
        "Record/AmbiguousReferenceBase": (
            "The reference sequence contains IUPAC ambiguity codes. "
            "Refrain from using {{disallowed}}."
        ),
        "Record/AmbiguousAlternateBase": (
            "The alternate sequence contains IUPAC ambiguity codes. "
            "Refrain from using {{disallowed}}."
        ),
        "Record/MissingReferenceBase": (
            "The reference sequence is missing. Refrain from using {{disallowed}}."
        ),
        "Record/MissingAlternateBase": (
            "The alternate sequence is missing. Refrain from using {{disallowed}}."
        ),
        "Record/IdenticalBases": (
            "Reference base(s) and alternative base(s) are identical."
        ),
        "Record/MultipleAlternateAlleles": (
            "The alternate sequence contains multiple variants."
        ),
        "Record/PositionFormat": "POS should be a number.",
        "Record/UnsortedPosition": (
            "Positions must be sorted numerically, in increasing order, "
            "within each reference sequence CHROM."
        ),
        "Record/DiscontiguousChromosome": (
            "CHROM must form a contiguous block within the VCF file."
        ),
        "Record/InsertionLength": (
            "The length of the insertion exceeds the allowed value. "
            "Maximum of length is {{max}}."
        ),
        "Record/DeletionLength": (
            "The length of the deletion exceeds the allowed value. "
            "Maximum of length is {{max}}."
        ),
        "Record/MismatchReferenceBase": (
            "The REF bases do not match the bases in the reference sequences. "
            'VCF = "{{vcf}}", FASTA = "{{fasta}}"'
        ),
    },
    Language.JA: {
        "Global/BlankLine": "VCFに空のデータ行が見つかりました、この行は無視されます。",
        "Global/DataBeforeHeader": (
            "ヘッダー行より前にデータが記述されています。この行は無視されます。"
        ),
        "Global/EmptyVCF": "VCFにレコードが存在しません。",
        "MetaInformation/FileFormat": (
            "ファイルの先頭に`fileformat`行が必ず1つ必要です。許可される値は{{allowed}}です。"
        ),
        "MetaInformation/Version": (
            "予期しないVCFバージョンです。期待されるバージョンは{{allowed}}です。"
        ),
        "Header/HeaderLine": "ヘッダー行が見つかりません。#から始まるヘッダー行が必要です。",
        "Header/HeaderColumn": "ヘッダー行には8つの固定カラム{{columns}}が必須です。",
        "Header/DuplicatedHeader": (
            "#から始まるヘッダー行が複数見つかりました。最初のヘッダー以外は無視されます。"
        ),
        "Record/AllowedReferenceBase": (
            "REFに使用できない文字が含まれます。使用できる文字は{{allowed}}です。"
        ),
        "Record/AllowedAlternateBase": (
            "ALTに使用できない文字が含まれます。使用できる文字は{{allowed}}です。"
        ),
        "Record/AmbiguousReferenceBase": (
            "REFに曖昧な塩基が含まれています。{{disallowed}}は使用できません。"
        ),
        "Record/AmbiguousAlternateBase": (
            "ALTに曖昧な塩基が含まれています。{{disallowed}}は使用できません。"
        ),
        "Record/MissingReferenceBase": (
            "REFに塩基が指定されていません。{{disallowed}}は使用できません。"
        ),
        "Record/MissingAlternateBase": (
            "ALTに塩基が指定されていません。{{disallowed}}は使用できません。"
        ),
        "Record/IdenticalBases": "REFとALTの塩基が同一です。",
        "Record/MultipleAlternateAlleles": "ALTに複数の変異が含まれます。",
        "Record/PositionFormat": "POSは数値でなければなりません。",
        "Record/UnsortedPosition": (
            "POSは各参照配列CHROMの中では昇順で数値ソートされている必要があります。"
        ),
        "Record/DiscontiguousChromosome": (
            "CHROMはVCFの中で連続したブロックである必要があります。"
        ),
        "Record/InsertionLength": (
            "挿入される塩基の長さが許容値を超えています。上限は{{max}}です。"
        ),
        "Record/DeletionLength": (
            "欠損される塩基の長さが許容値を超えています。上限は{{max}}です。"
        ),
        "Record/MismatchReferenceBase": (
            'VCFのREFの塩基が参照配列の塩基と一致しません。VCF = "{{vcf}}", FASTA = "{{fasta}}"'
        ),
    },
}
